# warmbench/tools/sort_cli.py
#
# Implements the command-line interface for `warmbench-sort`. It benchmarks
# insertion sort over arrays of one or more input orders and several run
# counts, printing the mean time of each configuration.

import argparse
import logging

import numpy as np

from .. import config
from ..benchmark import TimedBenchmark
from ..inputs import GENERATORS
from ..sorts import insertion_sort, is_sorted

logger = logging.getLogger(__name__)

DEFAULT_RUNS = (2, 4, 6, 8, 10, 14)


def check_sorted(a):
    if not is_sorted(a):
        raise AssertionError("insertion_sort left the array unsorted")


def benchmark_order(order, n, runs, rng):
    """
    Benchmarks insertion sort on a single input order.

    Args:
        order (str): A key of inputs.GENERATORS.
        n (int): Array length.
        runs: Iterable of run counts, one benchmark per count.
        rng: NumPy Generator used for the random orders.

    Returns:
        A list of (m, mean_ms) pairs for the configurations that succeeded,
        and the number of configurations that failed.
    """
    generator = GENERATORS[order]
    base = generator.make(n, rng)
    bench = TimedBenchmark(
        f"insertion sort ({generator.label.lower()}, n={n:,})",
        insertion_sort,
        post=check_sorted,
    )

    results = []
    failures = 0
    for m in runs:
        try:
            mean_ms = bench.run_from_supplier(base.copy, m)
        except Exception:
            logger.exception("Benchmark %r failed for m=%d", bench.description, m)
            failures += 1
            continue
        print(f"{generator.label:<18} m={m:<4} mean={mean_ms:.4f} ms")
        results.append((m, mean_ms))
    return results, failures


def build_parser():
    parser = argparse.ArgumentParser(
        prog="warmbench-sort",
        description="Benchmark insertion sort over ordered, reversed, partially ordered and random arrays."
    )
    parser.add_argument("--size", type=int, default=1000, help="Length of each input array.")
    parser.add_argument(
        "--runs", type=int, nargs="+", default=list(DEFAULT_RUNS),
        help="Timed run counts to benchmark."
    )
    parser.add_argument(
        "--order", choices=sorted(GENERATORS) + ["all"], default="all",
        help="Input order to benchmark."
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random input orders.")
    parser.add_argument(
        "--log-level", type=config.parse_level, default=None, metavar="LEVEL",
        help=f"Overrides ${config.LOG_LEVEL_ENV}."
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config.configure_logging(args.log_level)

    if args.size < 0:
        logger.error("--size must not be negative")
        return 2

    rng = np.random.default_rng(args.seed)
    orders = list(GENERATORS) if args.order == "all" else [args.order]

    failures = 0
    for order in orders:
        _, failed = benchmark_order(order, args.size, args.runs, rng)
        failures += failed
        print()

    print("Done" if not failures else f"Done, {failures} configuration(s) failed")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
