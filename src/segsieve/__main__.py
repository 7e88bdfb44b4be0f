"""
Main entry point for n-th prime search.
"""

import argparse
import logging
import sys

import polars as pl

from .core import SegmentedSieve
from .errors import InsufficientBoundError, InvalidArgumentError
from .utils import DEFAULT_LOG_FILE, TimingCollector, get_config, get_segment_size, memory_usage_mb, setup_logging

PRIME_TABLE_SCHEMA = {'index': pl.Int64, 'prime': pl.Int64}


def build_prime_table(finder, start_index: int, count: int) -> pl.DataFrame:
    """Primes at zero-based indices start_index .. start_index + count - 1."""
    rows = [(i, finder.nth_prime(i)) for i in range(start_index, start_index + count)]
    return pl.DataFrame(rows, schema=PRIME_TABLE_SCHEMA, orient='row')


def main(argv=None):
    parser = argparse.ArgumentParser(description='Find the prime at a zero-based index (0 -> 2) with a segmented sieve.')
    parser.add_argument('index', type=int,
                        help='Zero-based prime index')
    parser.add_argument('-c', '--count', type=int, default=None,
                        help='Report COUNT consecutive primes starting at INDEX as a table')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Write the --count table to this parquet file')
    parser.add_argument('-s', '--segment-size', type=int, default=None,
                        help='Integers per segment (default: config or 1,000,000)')
    parser.add_argument('-p', '--progress', action='store_true',
                        help='Show a progress bar over segments')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose (debug) logging')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Print timing summary and memory usage')

    args = parser.parse_args(argv)

    if args.output and args.count is None:
        parser.error("-o/--output requires -c/--count")
    if args.count is not None and args.count < 1:
        parser.error("-c/--count must be positive")

    config = get_config()
    setup_logging(verbose=args.verbose, log_file=config.get('log_file', DEFAULT_LOG_FILE))

    timer = TimingCollector(verbose=args.verbose) if args.debug else None
    try:
        segment_size = args.segment_size if args.segment_size is not None else get_segment_size(config)
        finder = SegmentedSieve(segment_size=segment_size,
                                show_progress=args.progress or config.get('show_progress', False),
                                timer=timer)

        if args.count is None:
            prime = finder.nth_prime(args.index)
            print(prime)
        else:
            table = build_prime_table(finder, args.index, args.count)
            print(table)
            if args.output:
                table.write_parquet(args.output)
                logging.info(f"Prime table saved to {args.output}")
    except InvalidArgumentError as e:
        parser.error(str(e))
    except InsufficientBoundError as e:
        logging.error(str(e))
        return 1

    if timer is not None:
        timer.print_summary()
        print(f"Memory (RSS): {memory_usage_mb():.1f} MiB")

    return 0


if __name__ == "__main__":
    sys.exit(main())
