"""
Corpus frequency toolkit.

This package provides tools for folding pre-tokenized corpus files
("word<TAB>count" lines behind a fixed "@" header) into one cumulative
frequency table and exporting sorted views of it.

Main components:
    - freq_aggregate: Walk a corpus tree into a persistent table and export it
"""

__all__ = []
