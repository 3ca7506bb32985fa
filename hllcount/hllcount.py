#!/usr/bin/env python
from __future__ import annotations
import argparse
import logging
import os
import sys
import time
from typing import List, Optional, Sequence, Tuple

from hllcount import logging_config
from hllcount.lib.errors import ConfigurationError
from hllcount.lib.hashing import HASH_FUNCTIONS, HashFunction, get_hash_function, xxhash64
from hllcount.lib.hyperloglog import DEFAULT_PRECISION, HyperLogLog, validate_precision
from hllcount.lib.utils import read_lines

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 100_000
DEFAULT_PROGRESS_EVERY = 1_000_000


def count_file(filepath: str,
               precision: int = DEFAULT_PRECISION,
               hash_func: HashFunction = xxhash64,
               chunk_size: int = DEFAULT_CHUNK_SIZE,
               progress_every: int = DEFAULT_PROGRESS_EVERY) -> Tuple[int, int]:
    """Estimate the number of distinct lines in a file.

    Args:
        filepath: Text file (optionally gzipped) with one element per line
        precision: HyperLogLog precision
        hash_func: 64-bit hash used by the sketch
        chunk_size: Number of lines read and added per batch
        progress_every: Log progress each time this many more lines are read

    Returns:
        Tuple of (estimated distinct lines, total lines read)

    Raises:
        ConfigurationError: If precision or hash_func are invalid
        OSError: If the file cannot be opened or read
        EOFError: If a gzip input is truncated
    """
    sketch = HyperLogLog(precision=precision, hash_func=hash_func)

    start_time = time.perf_counter()
    logger.info("Starting HyperLogLog count of %s (precision=%d, %d registers)",
                filepath, sketch.precision, sketch.num_registers)

    lines_read = 0
    next_report = progress_every
    for lines in read_lines(filepath, chunk_size):
        sketch.add_batch(lines)
        lines_read += len(lines)
        if lines_read >= next_report:
            logger.info("Processed %d lines", lines_read)
            next_report = (lines_read // progress_every + 1) * progress_every

    estimate = sketch.estimate()
    duration = time.perf_counter() - start_time
    logger.info("HyperLogLog count finished. Duration: %.3fs, lines: %d, estimated unique: %d",
                duration, lines_read, estimate)
    return estimate, lines_read


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    arg_parser = argparse.ArgumentParser(
        description="""Estimate the number of distinct lines in a text file using HyperLogLog.

        Each line (without its line terminator) is one element, so a file of
        IPv4 addresses yields an estimate of the number of unique addresses.
        Files ending in .gz are read transparently.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    arg_parser.add_argument('filepath', help='Text file with one element per line')
    arg_parser.add_argument("--precision", "-p", type=int, default=DEFAULT_PRECISION,
                            help=f"Precision for HyperLogLog sketching (default: {DEFAULT_PRECISION})")
    arg_parser.add_argument("--hash", choices=sorted(HASH_FUNCTIONS), default="xxhash64",
                            help="64-bit hash function (default: xxhash64)")
    arg_parser.add_argument("--seed", type=int, default=0, help="Seed for seeded hash functions")
    arg_parser.add_argument("--chunk-size", type=_positive_int, default=DEFAULT_CHUNK_SIZE,
                            dest='chunk_size', help="Lines read per batch")
    arg_parser.add_argument("--progress-every", type=_positive_int, default=DEFAULT_PROGRESS_EVERY,
                            dest='progress_every', help="Log progress every N lines")
    arg_parser.add_argument("--log-file", default=None, dest='log_file',
                            help="Append log records to this file")
    arg_parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")

    return arg_parser.parse_args(argv)


def _configure_logging(args: argparse.Namespace) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if args.verbose:
        handlers.append(logging_config.enable_console_logging(level="INFO"))
    if args.log_file:
        handlers.append(logging_config.enable_file_logging(args.log_file, level="INFO"))
    return handlers


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for hllcount."""
    args = parse_args(argv)
    root = logging.getLogger(logging_config.LOGGER_NAME)
    saved_level = root.level
    handlers = _configure_logging(args)

    try:
        if not os.path.isfile(args.filepath):
            print(f"Error: File {args.filepath} does not exist", file=sys.stderr)
            return 2

        try:
            precision = validate_precision(args.precision)
            hash_func = get_hash_function(args.hash, seed=args.seed)
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        print("Running HyperLogLog method...")
        try:
            estimate, _ = count_file(args.filepath,
                                     precision=precision,
                                     hash_func=hash_func,
                                     chunk_size=args.chunk_size,
                                     progress_every=args.progress_every)
        except (OSError, EOFError) as e:  # EOFError: truncated gzip stream
            logger.error("Error reading file %s: %s", args.filepath, e)
            print(f"Error reading file {args.filepath}: {e}", file=sys.stderr)
            return 2

        print(f"\nHyperLogLog result: {estimate} estimated unique elements")
        logger.info("Program finished. Estimated %d unique elements", estimate)
        return 0
    finally:
        for handler in handlers:
            root.removeHandler(handler)
            handler.close()
        root.setLevel(saved_level)


if __name__ == "__main__":
    sys.exit(main())
