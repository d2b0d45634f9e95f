#!/usr/bin/env python3
"""CLI entry point for a head-to-head code.golf scoreboard.

Usage:
    python compare_golfers.py acotis lynn --lang rust --cutoff 2024 \\
        --reference JayXon

    python compare_golfers.py acotis lynn --source file --data snapshot.json
"""

import argparse
import logging
import os
import sys
import time

# Add parent directory to path for imports (skip when frozen by PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from golfdiff.core.models import (
    ReportConfig, SCORINGS, GOLD_SCOPES, DEFAULT_LANG,
    DEFAULT_SCORE_BAR_WIDTH, DEFAULT_HOLE_NAME_WIDTH,
)
from golfdiff.core.cutoff import resolve_cutoff
from golfdiff.core.errors import ConfigurationError, FetchError
from golfdiff.core.logging_config import setup_logging
from golfdiff.core.report_generator import generate_report
from golfdiff.adapters.codegolf_adapter import API_ROOT, CodeGolfAdapter
from golfdiff.adapters.snapshot_adapter import SnapshotAdapter

logger = logging.getLogger('golfdiff')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Compare two code.golf golfers hole by hole')
    parser.add_argument('golfer_a', help='First golfer (wins are counted for them)')
    parser.add_argument('golfer_b', help='Second golfer')
    parser.add_argument('--lang', default=DEFAULT_LANG,
                        help=f'Language to compare in (default: {DEFAULT_LANG})')
    parser.add_argument('--cutoff', default='',
                        help='Only count solutions as of YYYY, YYYY-MM, YYYY-MM-DD '
                             '(through the end of it) or "YYYY-MM-DD HH:MM[:SS]" '
                             '(strictly before it). Default: now')
    parser.add_argument('--scoring', default='bytes', choices=SCORINGS,
                        help='Scoring mode (default: bytes)')
    parser.add_argument('--score-bar-width', type=int, default=DEFAULT_SCORE_BAR_WIDTH,
                        help=f'Width of the score bar; odd widths are rounded up '
                             f'(default: {DEFAULT_SCORE_BAR_WIDTH})')
    parser.add_argument('--hole-name-width', type=int, default=DEFAULT_HOLE_NAME_WIDTH,
                        help=f'Width of the hole name column; longer names are '
                             f'truncated with a warning rather than rejected '
                             f'(default: {DEFAULT_HOLE_NAME_WIDTH})')
    parser.add_argument('--reference', default=None,
                        help='Third golfer shown as a marker on the bars')
    parser.add_argument('--reverse', action='store_true',
                        help='Print holes in reverse catalog order')
    parser.add_argument('--gold-scope', default='lang', choices=GOLD_SCOPES,
                        help="Solutions that count towards gold: 'lang' for the "
                             "compared language only, 'all' for every language "
                             "(default: lang)")
    parser.add_argument('--source', default='api', choices=['api', 'file'],
                        help='Data source type (default: api)')
    parser.add_argument('--data', default=None,
                        help='Snapshot file to read (required for --source file)')
    parser.add_argument('--save-data', default=None,
                        help='Write the fetched API data to this snapshot file')
    parser.add_argument('--api-root', default=API_ROOT,
                        help=f'code.golf API root (default: {API_ROOT})')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-q', '--quiet', action='store_true',
                           help='Only log warnings and errors')
    verbosity.add_argument('-v', '--verbose', action='store_true',
                           help='Log every request')
    return parser


def _select_adapter(args):
    if args.source == 'file':
        if not args.data:
            raise ConfigurationError('--source file needs --data')
        return SnapshotAdapter(args.data)
    return CodeGolfAdapter(api_root=args.api_root)


def run(args) -> list[str]:
    """Fetch everything, then build the report lines."""
    config = ReportConfig(
        golfer_a=args.golfer_a,
        golfer_b=args.golfer_b,
        reference=args.reference,
        lang=args.lang,
        cutoff=args.cutoff,
        scoring=args.scoring,
        score_bar_width=args.score_bar_width,
        hole_name_width=args.hole_name_width,
        reverse=args.reverse,
        gold_scope=args.gold_scope,
    )
    config.validate()
    cutoff = resolve_cutoff(config.cutoff)
    if args.save_data and args.source != 'api':
        raise ConfigurationError('--save-data only applies to --source api')

    adapter = _select_adapter(args)
    adapter.validate_lang(config.lang)

    logger.info('Fetching list of holes...')
    holes = adapter.fetch_holes()

    logger.info(f'Fetching solution log for {len(holes)} holes...')
    fetch_lang = None if config.gold_scope == 'all' else config.lang
    logs = {hole.id: adapter.fetch_submissions(hole.id, fetch_lang) for hole in holes}
    logger.info(f'{sum(len(log) for log in logs.values())} total solutions')

    if args.save_data:
        adapter.save_snapshot(args.save_data)
        logger.info(f'Saved snapshot to {args.save_data}')

    before = time.perf_counter()
    lines = generate_report(holes, logs, config, cutoff)
    logger.info(f'Done processing in {(time.perf_counter() - before) * 1000:.0f}ms')
    return lines


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.quiet:
        setup_logging(logging.WARNING)
    elif args.verbose:
        setup_logging(logging.DEBUG)
    else:
        setup_logging(logging.INFO)

    try:
        lines = run(args)
    except ConfigurationError as e:
        print(f'error: {e}', file=sys.stderr)
        return 2
    except FetchError as e:
        print(f'error: {e}', file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
