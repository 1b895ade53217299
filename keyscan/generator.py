# generator.py
# Writes synthetic log files to benchmark the scanner against.

import argparse
import datetime
import os
import random
import sys

LOG_LEVELS = ['INFO', 'WARN', 'ERROR', 'DEBUG']
MESSAGES = [
    'Connection established',
    'Request processed successfully',
    'Database query executed',
    'Cache miss',
    'Authentication failed',
    'Disk read failed',
    'Memory allocation error',
    'Network timeout',
    'Warning: disk usage above 90%',
    'Backup completed with success',
]


def generate_log_file(filename, num_lines=1000, rng=None):
    rng = rng or random.Random()
    start = datetime.datetime(2024, 1, 1)
    with open(filename, 'w') as f:
        for i in range(num_lines):
            timestamp = (start + datetime.timedelta(seconds=i)).isoformat()
            level = rng.choice(LOG_LEVELS)
            message = rng.choice(MESSAGES)
            f.write(f"[{timestamp}] [{level}] {message}\n")
    return filename


def parse_args(argv):
    p = argparse.ArgumentParser(description="Generate sample log files for keyscan")
    p.add_argument('out_dir', help="Directory to write node<N>.log files into")
    p.add_argument('--files', type=int, default=10, help="Number of files to write")
    p.add_argument('--lines', type=int, default=5000, help="Lines per file")
    p.add_argument('--seed', type=int, default=None, help="Seed for reproducible output")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.files <= 0 or args.lines < 0:
        print("--files must be positive and --lines non-negative", file=sys.stderr)
        return 1
    os.makedirs(args.out_dir, exist_ok=True)
    rng = random.Random(args.seed)
    for i in range(1, args.files + 1):
        generate_log_file(os.path.join(args.out_dir, f"node{i}.log"), args.lines, rng)
    print(f"Wrote {args.files} file(s) of {args.lines} line(s) to {args.out_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
