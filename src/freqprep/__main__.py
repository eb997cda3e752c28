"""Allow ``python -m freqprep``."""
import sys

from freqprep.freq_aggregate.cli import main

sys.exit(main())
