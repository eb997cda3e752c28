"""
Tests for the sorted export files
"""

import os
from pathlib import Path

from freqprep.freq_aggregate.exporter import export_table, write_export
from freqprep.freq_aggregate.table import FrequencyRecord


def read_lines(path):
    with open(path, encoding='utf-8') as f:
        return f.read().splitlines()


class TestExportTable:
    """Tests for the dual export"""

    def test_single_file_scenario(self, temp_dir, table):
        table.upsert('foo', 5)
        table.upsert('bar', 1)
        paths = (_path(temp_dir, 'c.tsv'), _path(temp_dir, 'w.tsv'))

        stats = export_table(table, paths)

        assert (stats.size, stats.size_n) == (6, 5)
        assert read_lines(paths[0]) == ['@size\t6', '@size-1\t5', 'foo\t5']
        assert read_lines(paths[1]) == ['@size\t6', '@size-1\t5', 'foo\t5']
        assert stats.rows_by_count == stats.rows_by_word == 1

    def test_orderings_and_filter(self, temp_dir, table):
        for word, count in [('b', 3), ('a', 3), ('z', 10), ('m', 1), ('q', 0), ('c', 2)]:
            table.upsert(word, count)
        paths = (_path(temp_dir, 'c.tsv'), _path(temp_dir, 'w.tsv'))

        stats = export_table(table, paths)

        by_count = [line.split('\t') for line in read_lines(paths[0])[2:]]
        by_word = [line.split('\t') for line in read_lines(paths[1])[2:]]

        counts = [int(c) for _, c in by_count]
        assert counts == sorted(counts, reverse=True)
        assert [w for w, _ in by_word] == sorted(w for w, _ in by_word)
        assert sorted(map(tuple, by_count)) == sorted(map(tuple, by_word))
        assert all(int(c) > 1 for _, c in by_count)
        assert by_count[:3] == [['z', '10'], ['a', '3'], ['b', '3']]
        assert stats.size == 19
        assert stats.size_n == 18

    def test_size_equal_when_no_singletons(self, temp_dir, table):
        table.upsert('foo', 2)
        table.upsert('bar', 4)
        stats = export_table(table, (_path(temp_dir, 'c.tsv'), _path(temp_dir, 'w.tsv')))
        assert stats.size == stats.size_n == 6

    def test_custom_min_count_labels_header(self, temp_dir, table):
        table.upsert('foo', 5)
        table.upsert('bar', 2)
        paths = (_path(temp_dir, 'c.tsv'), _path(temp_dir, 'w.tsv'))

        export_table(table, paths, min_count=3)

        assert read_lines(paths[0]) == ['@size\t7', '@size-2\t5', 'foo\t5']

    def test_empty_table(self, temp_dir, table):
        paths = (_path(temp_dir, 'c.tsv'), _path(temp_dir, 'w.tsv'))
        stats = export_table(table, paths)
        assert read_lines(paths[0]) == ['@size\t0', '@size-1\t0']
        assert stats.rows_by_count == 0


class TestWriteExport:
    """Tests for writing one file"""

    def test_creates_parent_directories(self, temp_dir):
        path = _path(temp_dir, 'a', 'b', 'out.tsv')
        rows = write_export(path, [FrequencyRecord('x', 2)], 2, 2)
        assert rows == 1
        assert read_lines(path) == ['@size\t2', '@size-1\t2', 'x\t2']


def _path(*parts):
    return Path(os.path.join(*parts))
