"""Demo driver: generate two random matrices, multiply them block-wise, print.

Run as:
  - `python -m blockmat --a-shape 100 200 --b-shape 200 100 --block 4 4`
  - `blockmat --verify --output serialized`

Exit code:
  - 0: OK
  - 1: `--verify` found the block product differs from the flat product
  - 2: invalid arguments (e.g. incompatible shapes)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from ._internal import runtime as _runtime
from ._internal.codec import serialize
from ._internal.errors import BlockmatError
from ._internal.factories import random_matrix
from ._internal.formatting import partition_str
from .logging_config import setup_logging


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockmat",
        description="Multiply two random integer matrices via block partitioning",
    )
    parser.add_argument("--a-shape", nargs=2, type=int, default=[100, 200], metavar=("R", "C"))
    parser.add_argument("--b-shape", nargs=2, type=int, default=[200, 100], metavar=("R", "C"))
    parser.add_argument(
        "--block",
        nargs=2,
        type=int,
        default=[4, 4],
        metavar=("R", "C"),
        help="Maximum block size for A; B uses the transposed size (default: 4 4)",
    )
    parser.add_argument("--low", type=int, default=10, help="Inclusive lower bound (default: 10)")
    parser.add_argument("--high", type=int, default=20, help="Exclusive upper bound (default: 20)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")
    parser.add_argument(
        "--output",
        choices=("pretty", "serialized"),
        default="pretty",
        help="How to print the result matrix (default: pretty)",
    )
    parser.add_argument(
        "--show-partition",
        action="store_true",
        help="Also print the block structure of the result partition.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the block product against the flat product.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $BLOCKMAT_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level or _runtime.settings().log_level)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        # Seed b from a's seed so both operands are reproducible but distinct.
        seed_b = None if args.seed is None else args.seed + 1
        a = random_matrix(*args.a_shape, args.low, args.high, seed=args.seed)
        b = random_matrix(*args.b_shape, args.low, args.high, seed=seed_b)
        logger.info("generated A %dx%d and B %dx%d", *a.shape, *b.shape)

        pa = a.partition(*args.block)
        # B is blocked with the transposed size so its row blocks line up with
        # A's column blocks.
        block_rows, block_cols = args.block
        pb = b.partition(block_cols, block_rows)
        logger.info("partitioned into %dx%d and %dx%d block grids", *pa.shape, *pb.shape)

        result_partition = pa.multiply(pb)
        result = result_partition.to_matrix()
        logger.info("block product reconstructed as %dx%d", *result.shape)

        if args.verify:
            expected = a.multiply(b)
            if result != expected:
                print("FAIL: block product differs from flat product")
                return 1
            logger.info("verified block product against flat product")
    except (BlockmatError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.show_partition:
        print(partition_str(result_partition))
    if args.output == "serialized":
        sys.stdout.write(serialize(result))
    else:
        print(result)
    print("ok")
    return 0
