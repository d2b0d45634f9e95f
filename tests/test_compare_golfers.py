"""Tests for the command-line entry point, run against a snapshot file."""

import json
import logging
import os
import sys
import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from golfdiff import compare_golfers
from golfdiff.compare_golfers import main

REFERENCE_DIR = os.path.join(PROJECT_ROOT, 'tests', 'reference_data')
SNAPSHOT = os.path.join(REFERENCE_DIR, 'snapshot.json')

BASE_ARGS = ['alice', 'bob', '--source', 'file', '--data', SNAPSHOT,
             '--cutoff', '2024', '--reference', 'carol',
             '--score-bar-width', '9', '--hole-name-width', '12', '--quiet']


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(scope='module')
def expected_lines():
    with open(os.path.join(REFERENCE_DIR, 'expected_report.txt')) as f:
        return f.read().splitlines()


class TestReportOutput:
    def test_matches_reference(self, capsys, expected_lines):
        assert main(BASE_ARGS) == 0
        actual = capsys.readouterr().out.splitlines()
        assert actual == expected_lines, "Report does not match expected"

    def test_reverse(self, capsys, expected_lines):
        assert main(BASE_ARGS + ['--reverse']) == 0
        actual = capsys.readouterr().out.splitlines()
        assert actual[0] == expected_lines[0]
        assert actual[1:] == expected_lines[1:][::-1]

    def test_gold_scope_all(self, capsys):
        assert main(BASE_ARGS + ['--gold-scope', 'all']) == 0
        lines = capsys.readouterr().out.splitlines()
        # erin's python solution now sets gold for Fizz Buzz
        assert lines[1].endswith(' -1 (70, 71, 40)')

    def test_without_cutoff(self, capsys):
        args = [a for a in BASE_ARGS if a not in ('--cutoff', '2024')]
        assert main(args) == 0
        lines = capsys.readouterr().out.splitlines()
        assert '(rust, bytes, as of now, reference carol)' in lines[0]
        # bob's 2025 quine and dave's 2025 fizz buzz now count
        assert lines[1].endswith(' -1 (70, 71, 50)')
        assert lines[3].endswith(' +15 (45, 30, 30)')

    def test_report_goes_to_stdout_only(self, capsys):
        args = [a for a in BASE_ARGS if a != '--quiet']
        assert main(args) == 0
        captured = capsys.readouterr()
        assert len(captured.out.splitlines()) == 5
        assert 'Fetching list of holes' in captured.err

    def test_long_hole_names_warn_and_truncate(self, capsys):
        assert main(BASE_ARGS) == 0
        captured = capsys.readouterr()
        assert 'Catalan Num ' in captured.out
        assert 'Catalan Numbers' not in captured.out
        assert "truncates 1 name(s) to 11 characters, e.g. 'Catalan Numbers'" in captured.err

    def test_help_states_truncation(self):
        action = next(a for a in compare_golfers.build_parser()._actions
                      if a.dest == 'hole_name_width')
        assert 'truncated with a warning' in action.help


class TestErrors:
    @pytest.mark.parametrize('extra', [
        ['--cutoff', '2024-13'],
        ['--cutoff', 'last tuesday'],
        ['--lang', 'cobol'],
        ['--score-bar-width', '2'],
        ['--hole-name-width', '1'],
        ['--reference', 'alice'],
        ['--save-data', 'out.json'],
    ])
    def test_configuration_error_exit_code(self, capsys, extra):
        assert main(BASE_ARGS + extra) == 2
        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err.startswith('error: ')

    def test_file_source_needs_data(self, capsys):
        assert main(['alice', 'bob', '--source', 'file', '--quiet']) == 2
        assert '--data' in capsys.readouterr().err

    def test_missing_snapshot_is_fetch_error(self, capsys, tmp_path):
        args = ['alice', 'bob', '--source', 'file', '--quiet',
                '--data', str(tmp_path / 'missing.json')]
        assert main(args) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err.startswith('error: ')

    def test_bad_cutoff_fails_before_fetching(self, capsys, monkeypatch):
        def fail(args):
            raise AssertionError('adapter should not be created')
        monkeypatch.setattr(compare_golfers, '_select_adapter', fail)
        assert main(BASE_ARGS + ['--cutoff', '2024-02-30']) == 2
        assert 'Invalid cutoff' in capsys.readouterr().err

    def test_malformed_solution_log_is_fetch_error(self, capsys, tmp_path):
        path = tmp_path / 'snapshot.json'
        path.write_text(json.dumps({'holes': [{'id': 'quine', 'name': 'Quine'}],
                                    'solutions': {'quine': 42}}))
        args = ['alice', 'bob', '--source', 'file', '--quiet', '--data', str(path)]
        assert main(args) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err.startswith('error: ')

    def test_non_dict_records_are_skipped(self, capsys, tmp_path):
        path = tmp_path / 'snapshot.json'
        path.write_text(json.dumps({
            'langs': ['rust'],
            'holes': ['fizz-buzz', {'id': 'quine', 'name': 'Quine'}],
            'solutions': {'quine': [
                42,
                {'golfer': 'alice', 'lang': 'rust', 'bytes': 40,
                 'submitted': '2024-01-01T00:00:00Z'},
            ]},
        }))
        args = ['alice', 'bob', '--source', 'file', '--quiet', '--data', str(path),
                '--score-bar-width', '4', '--hole-name-width', '8']
        assert main(args) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines()[1:] == ['Quine   ##.. - (40, -, 40)']
        assert 'Skipped 1 malformed hole(s)' in captured.err
        assert 'Skipped 1 malformed solution(s) for quine' in captured.err
