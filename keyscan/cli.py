#!/usr/bin/env python3
# cli.py
# Command line entry point: parallel vs sequential keyword scan with a
# printed comparison and a summary file.

import argparse
import logging
import sys

from keyscan.discovery import DEFAULT_EXTENSIONS, build_from_pattern, discover_files, read_manifest
from keyscan.keywords import DEFAULT_KEYWORDS, normalize_keywords
from keyscan.pool import BACKENDS, DEFAULT_SHUTDOWN_TIMEOUT, WorkerPool
from keyscan.runner import ComparativeRunner
from keyscan.summary import write_summary

DEFAULT_OUTPUT = "output/log_result.txt"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level="WARNING"):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr, force=True)


def parse_args(argv):
    p = argparse.ArgumentParser(description="Parallel keyword-frequency scanner for log files")
    p.add_argument('input', nargs='?', help="Directory containing .txt / .log files")
    src = p.add_mutually_exclusive_group()
    src.add_argument('--manifest', help="Manifest file (one path per line)")
    src.add_argument('--pattern', help="Filename pattern containing '{n}'")
    p.add_argument('--count', type=int, default=0,
                   help="When using --pattern, the number of files to construct (1..count).")
    p.add_argument('-k', '--keywords', nargs='+', default=list(DEFAULT_KEYWORDS),
                   help="Keywords to count (case-insensitive)")
    p.add_argument('-w', '--workers', type=int, default=None,
                   help="Maximum number of parallel workers (default: CPU count)")
    p.add_argument('--backend', choices=BACKENDS, default="thread", help="Worker pool backend")
    p.add_argument('--shutdown-timeout', type=float, default=DEFAULT_SHUTDOWN_TIMEOUT,
                   help="Seconds to wait for the pool before stopping unfinished scans")
    p.add_argument('--no-seq', action='store_true', help="Don't run the sequential baseline")
    p.add_argument('-o', '--output', default=DEFAULT_OUTPUT, help="Summary file path")
    p.add_argument('--log-level', default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return p.parse_args(argv)


def resolve_files(args):
    """Return the files to scan, or None after printing why the input is unusable."""
    if args.input and (args.manifest or args.pattern):
        print("Give either a directory or --manifest/--pattern, not both.", file=sys.stderr)
        return None
    if args.manifest:
        try:
            return read_manifest(args.manifest)
        except OSError as e:
            print(f"Failed to read manifest '{args.manifest}': {e}", file=sys.stderr)
            return None
    if args.pattern:
        try:
            return build_from_pattern(args.pattern, args.count)
        except ValueError as e:
            print(f"Invalid pattern: {e}", file=sys.stderr)
            return None

    directory = args.input
    if not directory:
        try:
            directory = input("Enter log folder path: ").strip()
        except EOFError:
            directory = ""
    try:
        return discover_files(directory, DEFAULT_EXTENSIONS)
    except NotADirectoryError:
        print(f"Invalid folder path: {directory!r}", file=sys.stderr)
        return None


def print_report(report):
    print("\n" + "=" * 50)
    print("ANALYSIS RESULTS")
    print("=" * 50)
    for k in report.keywords:
        print(f"{k.upper()}: {report.parallel_total.get(k, 0)}")
    top = report.most_frequent
    print(f"MOST FREQUENT KEYWORD: {top.upper() if top else 'None'}")
    print("-" * 50)
    print("FILES")
    for r in report.files:
        status = f" [{r.error.kind}]" if r.error is not None else ""
        print(f"  {r.path} | lines: {r.lines}{status}")
    failed = sorted({e.path for e in report.failures})
    if failed:
        print(f"FILES WITH ERRORS: {len(failed)}")
        for e in report.failures:
            print(f"  [{e.kind}] {e}")
    print("=" * 50)
    print(f"Workers: {report.pool_size}")
    print(f"Parallel time (measured): {report.parallel_elapsed:.4f}s")
    if report.sequential_elapsed is not None:
        print(f"Sequential time (measured): {report.sequential_elapsed:.4f}s")
        if report.speedup is not None:
            print(f"Speedup: {report.speedup:.2f}x")
            print(f"Efficiency: {report.efficiency:.2f}")
        if not report.totals_match:
            print("WARNING: parallel and sequential totals differ")
    else:
        print("Sequential time: N/A (--no-seq)")
    print("=" * 50)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.log_level)

    try:
        keywords = normalize_keywords(args.keywords)
        pool = WorkerPool(max_workers=args.workers, backend=args.backend,
                          shutdown_timeout=args.shutdown_timeout)
    except ValueError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return 1

    file_list = resolve_files(args)
    if file_list is None:
        return 1
    if not file_list:
        if args.manifest:
            print(f"Manifest '{args.manifest}' lists no files")
        elif args.pattern:
            print(f"Pattern '{args.pattern}' produced no files")
        else:
            print("No log files found (.txt / .log)")
        return 0

    print(f"Found {len(file_list)} file(s) to analyse")
    runner = ComparativeRunner(keywords, pool=pool, sequential=not args.no_seq)
    report = runner.run(file_list)
    print_report(report)

    try:
        write_summary(args.output, report)
    except OSError as e:
        logger.error("Could not write summary to %s: %s", args.output, e)
        print(f"Error writing output file {args.output}: {e}", file=sys.stderr)
        return 1
    print(f"Results saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
