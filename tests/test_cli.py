"""
Tests for the command-line entry point
"""

import os

import pytest

from freqprep.freq_aggregate.cli import build_parser, main


class TestArguments:
    """Tests for argument parsing"""

    def test_requires_both_positionals(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(['only-input'])
        assert exc_info.value.code != 0

    def test_defaults(self):
        args = build_parser().parse_args(['in', 'out'])
        assert args.min_count == 2
        assert args.on_malformed == 'fail'
        assert args.db_path == 'freqs.db3'
        assert not args.follow_symlinks


class TestMain:
    """Tests for exit codes and outputs"""

    def test_success(self, temp_dir, corpus_dir, make_corpus_file, capsys):
        make_corpus_file(corpus_dir, 'one.txt', ['foo\t3', 'bar\t1', 'foo\t2'])
        prefix = os.path.join(temp_dir, 'out', 'freqs')

        code = main([
            corpus_dir, prefix,
            '--db', os.path.join(temp_dir, 'freqs.db3'),
            '--no-progress',
        ])

        assert code == 0
        with open(prefix + '.by_count.tsv', encoding='utf-8') as f:
            assert f.read() == '@size\t6\n@size-1\t5\nfoo\t5\n'
        assert 'Aggregation Complete' in capsys.readouterr().out

    def test_structural_error_exits_nonzero(self, temp_dir, corpus_dir, make_corpus_file):
        make_corpus_file(corpus_dir, 'bad.txt', ['foo\t3'], header='oops\n')

        code = main([
            corpus_dir, os.path.join(temp_dir, 'freqs'),
            '--db', os.path.join(temp_dir, 'freqs.db3'),
            '--quiet',
        ])

        assert code == 1

    def test_missing_input_exits_nonzero(self, temp_dir):
        code = main([
            os.path.join(temp_dir, 'absent'), os.path.join(temp_dir, 'freqs'),
            '--db', os.path.join(temp_dir, 'freqs.db3'),
            '--quiet',
        ])
        assert code == 1

    def test_unusable_table_location_exits_nonzero(self, temp_dir, corpus_dir, make_corpus_file):
        make_corpus_file(corpus_dir, 'one.txt', ['foo\t3'])

        code = main([
            corpus_dir, os.path.join(temp_dir, 'freqs'),
            '--db', temp_dir,
            '--quiet',
        ])

        assert code == 1

    def test_skip_policy(self, temp_dir, corpus_dir, make_corpus_file):
        make_corpus_file(corpus_dir, 'bad.txt', ['foo\t3'], header='oops\n')
        make_corpus_file(corpus_dir, 'good.txt', ['foo\t3'])

        code = main([
            corpus_dir, os.path.join(temp_dir, 'freqs'),
            '--db', os.path.join(temp_dir, 'freqs.db3'),
            '--on-malformed', 'skip',
            '--quiet',
        ])

        assert code == 0
