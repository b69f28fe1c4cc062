#!/usr/bin/env python3
"""Command line driver.

Reads a segment set in the text format of :mod:`segsweep.core.io` from a file
or stdin, runs the sweep and prints ``NO`` or ``YES`` plus the 1-based pair.

Examples:
  segsweep input.txt
  segsweep < input.txt
  segsweep input.txt --verify --stats --log-level INFO
  segsweep input.txt --plot answer.png
"""
from __future__ import annotations

import argparse
import json
import sys

from .core.bruteforce import verify_result
from .core.config import SweepConfig
from .core.io import load_segments, read_segments, format_result
from .core.logging_utils import configure_logging, get_logger
from .core.stats import SweepStats, format_stats
from .core.status import StatusOrderError
from .core.sweep import find_intersection

logger = get_logger('segsweep.cli')

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_VERIFY_FAILED = 2

_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='segsweep', description='Report one intersecting pair among a set of segments.')
    p.add_argument('input', nargs='?', default='-', help="Input file ('-' or omitted for stdin)")
    p.add_argument('--log-level', type=str, choices=_LEVELS, default='WARNING', help='Logging verbosity (default: WARNING)')
    p.add_argument('--verify', action='store_true', help='Cross-check the answer with the O(n^2) pairwise scan')
    p.add_argument('--stats', action='store_true', help='Log sweep statistics at INFO')
    p.add_argument('--plot', type=str, default=None, help='Write a picture of the segments and the reported pair')
    p.add_argument('--check-invariants', action='store_true', help='Validate the sweep status order after every insertion')
    p.add_argument('--seed', type=int, default=None, help='Seed for the status skip list (default: 0)')
    p.add_argument('--config-json', type=str, default=None, help='JSON file with SweepConfig fields; flags override it')
    p.add_argument('--dump-config', action='store_true', help='Print the effective configuration as JSON and exit')
    return p


def _load_config(args) -> SweepConfig:
    data = {}
    if args.config_json:
        with open(args.config_json, 'r') as f:
            data = json.load(f)
    cfg = SweepConfig.from_dict(data)
    if args.seed is not None:
        cfg.seed = args.seed
    if args.check_invariants:
        cfg.check_invariants = True
    if args.stats:
        cfg.collect_stats = True
    return cfg


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        cfg = _load_config(args)
    except (OSError, ValueError, TypeError) as e:
        logger.error("bad configuration: %s", e)
        print(f"segsweep: bad configuration: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    if args.dump_config:
        print(json.dumps(cfg.to_dict(), indent=2, sort_keys=True))
        return EXIT_OK

    try:
        if args.input == '-':
            segments = load_segments(sys.stdin)
        else:
            segments = read_segments(args.input)
    except (OSError, ValueError) as e:
        logger.error("cannot read input: %s", e)
        print(f"segsweep: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    stats = SweepStats()
    try:
        result = find_intersection(segments, config=cfg, stats=stats)
    except StatusOrderError as e:
        logger.error("status order check failed: %s", e)
        print(f"segsweep: internal ordering error: {e}", file=sys.stderr)
        return EXIT_VERIFY_FAILED
    if cfg.collect_stats:
        logger.info("sweep stats:\n%s", format_stats(stats))

    print(format_result(result))

    if args.plot:
        from .core.visualization import plot_segments
        plot_segments(segments, args.plot, highlight=result)
        logger.info("plot written to %s", args.plot)

    if args.verify:
        if not verify_result(segments, result):
            print("segsweep: verification against pairwise scan failed", file=sys.stderr)
            return EXIT_VERIFY_FAILED
        logger.info("verified against pairwise scan")
    return EXIT_OK


if __name__ == '__main__':
    raise SystemExit(main())
