# warmbench/benchmark.py
#
# The benchmark contract and its timed implementation. A TimedBenchmark
# wires a three-phase workload (prepare, measure, verify) into two Timer
# sessions: a warmup session whose result is thrown away, followed by the
# timed session whose mean is reported. Warmup stabilises caches and the
# interpreter before any number is taken.

import abc
import logging

from . import config
from .errors import ProgrammerError
from .timer import Timer


def warmup_runs(m: int) -> int:
    """
    Calculates the number of warmup runs for a benchmark of m timed runs.

    Returns:
        m // 10, clamped to the range [2, 10].
    """
    return max(config.MIN_WARMUP_RUNS, min(config.MAX_WARMUP_RUNS, m // config.WARMUP_DIVISOR))


class Benchmark(abc.ABC):
    """Something that runs a configured workload m times and returns the mean time."""

    def run(self, value, m: int) -> float:
        """
        Runs the workload m times against the same value.

        Args:
            value: The input handed to every iteration.
            m (int): The number of timed runs.

        Returns:
            The mean time in milliseconds.
        """
        return self.run_from_supplier(lambda: value, m)

    @abc.abstractmethod
    def run_from_supplier(self, supplier, m: int) -> float:
        """Runs the workload m times, drawing each input from `supplier`."""


class TimedBenchmark(Benchmark):
    """
    Measures the running time of a function, with optional untimed
    preparation and verification around it.

    Example:
        bench = TimedBenchmark(
            "insertion sort",
            insertion_sort,
            post=check_sorted,
        )
        mean_ms = bench.run_from_supplier(lambda: data.copy(), 100)
    """
    def __init__(self, description, measure, pre=None, post=None, *, clock=None, logger=None):
        """
        Args:
            description (str): Label used in log output.
            measure: The function being timed. It receives the (prepared)
                input and is expected to work on it in place; its return
                value is ignored.
            pre: Optional function T -> T run before each call to
                `measure`, with the clock stopped.
            post: Optional function run on the input after `measure`,
                with the clock stopped. Skipped during warmup.
            clock: Optional nanosecond clock passed to every Timer.
            logger: Optional logger; defaults to this module's logger.
        """
        if measure is None or not callable(measure):
            raise ProgrammerError(f"Benchmark '{description}' requires a callable measure function.")

        self.description = description
        self.pre = pre
        self.measure = measure
        self.post = post
        self._clock = clock
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def __repr__(self):
        return f"TimedBenchmark({self.description!r})"

    def _run_and_pass_through(self, value):
        self.measure(value)
        return value

    def run_from_supplier(self, supplier, m: int) -> float:
        """
        Runs the warmup session followed by the timed session.

        Args:
            supplier: Zero-argument callable producing a fresh input for
                each iteration.
            m (int): The number of timed runs, at least 1.

        Returns:
            The mean time of `measure` in milliseconds over the m timed runs.
        """
        if m < 1:
            raise ProgrammerError(f"Benchmark '{self.description}' needs at least one run, got {m}")

        self._logger.info("Begin run: %s with %s runs", self.description, f"{m:,}")

        # Warmup: prepare still runs, verification does not.
        Timer(self._clock).repeat(warmup_runs(m), supplier, self._run_and_pass_through, self.pre, None)

        return Timer(self._clock).repeat(m, supplier, self._run_and_pass_through, self.pre, self.post)
