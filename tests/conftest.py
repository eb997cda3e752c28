"""
Pytest configuration and shared fixtures
"""

import os
import shutil
import tempfile

import pytest

from freqprep.freq_aggregate.config import AggregateConfig
from freqprep.freq_aggregate.table import open_table

HEADER = "@@@@@\n" * 5


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files"""
    dirpath = tempfile.mkdtemp()
    yield dirpath
    shutil.rmtree(dirpath)


@pytest.fixture
def corpus_dir(temp_dir):
    """Empty corpus root inside the temporary directory"""
    path = os.path.join(temp_dir, 'corpus')
    os.makedirs(path)
    return path


@pytest.fixture
def make_corpus_file():
    """Factory writing a corpus file with a valid header and the given data lines"""
    def _make(directory, name, lines, header=HEADER):
        os.makedirs(directory, exist_ok=True)
        filepath = os.path.join(directory, name)
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(header)
            for line in lines:
                f.write(line + '\n')
        return filepath
    return _make


@pytest.fixture
def table(temp_dir):
    """Freshly reset frequency table"""
    with open_table(os.path.join(temp_dir, 'freqs.db3'), mode='w') as t:
        yield t


@pytest.fixture
def make_config(temp_dir, corpus_dir):
    """Factory for a run configuration rooted in the temporary directory"""
    def _make(**overrides):
        kwargs = dict(
            input_dir=corpus_dir,
            output_prefix=os.path.join(temp_dir, 'out', 'freqs'),
            db_path=os.path.join(temp_dir, 'freqs.db3'),
            show_progress=False,
        )
        kwargs.update(overrides)
        return AggregateConfig(**kwargs)
    return _make
