"""Setup file for the corpus frequency aggregation toolkit."""

from setuptools import setup, find_packages

setup(
    name="freqprep",
    version="0.1.0",
    description="Aggregate pre-tokenized corpus word counts into sorted frequency tables",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "freq-aggregate=freqprep.freq_aggregate.cli:main",
        ],
    },
)
