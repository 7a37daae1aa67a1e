# warmbench/timer.py
#
# A low-level stopwatch. Elapsed time is accumulated as integer ticks
# (nanoseconds) across any number of start/pause cycles, so untimed work can
# be interleaved with timed work while sharing a single accumulator. The
# `repeat` method builds the per-iteration protocol of the harness on top of
# that: supply, prepare, time the test function, then post-process.

import logging

from . import config
from .errors import ProgrammerError, TimerError

logger = logging.getLogger(__name__)


def to_millis(ticks: int) -> float:
    """Converts clock ticks (nanoseconds) to floating point milliseconds."""
    return ticks / config.NANOS_PER_MILLI


class Timer:
    """
    A stopwatch with explicit start/pause/resume/stop semantics.

    Example:
        with Timer() as t:
            work()
        print(t.elapsed_ms)
    """
    def __init__(self, clock=None):
        """
        Creates a paused timer with an empty accumulator.

        Args:
            clock: A zero-argument callable returning monotonic time in
                integer nanoseconds. Defaults to time.perf_counter_ns.
        """
        self._clock = clock if clock is not None else config.DEFAULT_CLOCK
        self._ticks = 0
        self._laps = 0
        self._running = False

    def __repr__(self):
        state = "running" if self._running else f"{to_millis(self._ticks):.4f} ms"
        return f"Timer(laps={self._laps}, {state})"

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # The body may already have paused or stopped the timer.
        if self._running:
            self.stop()

    @property
    def running(self) -> bool:
        return self._running

    @property
    def laps(self) -> int:
        return self._laps

    @property
    def elapsed_ms(self) -> float:
        """Accumulated time in milliseconds. Only readable while paused."""
        if self._running:
            raise TimerError("Cannot read elapsed time while the timer is running.")
        return to_millis(self._ticks)

    def start(self):
        """Begins (or continues) accumulating elapsed time."""
        if self._running:
            raise TimerError("Timer is already running. Use .pause() or .stop() first.")
        # The start instant is subtracted now and the stop instant added
        # later, so the accumulator holds the sum of all closed intervals.
        self._ticks -= self._clock()
        self._running = True

    def resume(self):
        """Continues accumulating after a pause."""
        if self._running:
            raise TimerError("Timer is already running; cannot resume.")
        self.start()

    def pause(self):
        """Stops accumulating without resetting the accumulator."""
        now = self._clock()
        if not self._running:
            raise TimerError("Timer is not running. Use .start() first.")
        self._ticks += now
        self._running = False

    def lap(self):
        """Counts a lap without stopping the clock."""
        if not self._running:
            raise TimerError("Cannot record a lap while the timer is paused.")
        self._laps += 1

    def pause_and_lap(self):
        """Pauses the clock and counts the interval just closed as a lap."""
        self.pause()
        self._laps += 1

    def stop(self) -> float:
        """
        Ends the measurement session.

        Returns:
            The total accumulated time in milliseconds.
        """
        self.pause_and_lap()
        return self.elapsed_ms

    def reset(self):
        """Zeroes the accumulator and the lap count."""
        if self._running:
            raise TimerError("Cannot reset a running timer.")
        self._ticks = 0
        self._laps = 0

    def mean_lap_time(self) -> float:
        """Returns the accumulated milliseconds divided by the number of laps."""
        if self._running:
            raise TimerError("Cannot compute the mean lap time while running.")
        if self._laps == 0:
            raise TimerError("No laps have been recorded.")
        return to_millis(self._ticks) / self._laps

    def repeat(self, n, supplier, function, pre=None, post=None) -> float:
        """
        Runs `function` n times and returns its mean duration.

        Only the call to `function` is timed. The supplier, `pre` and `post`
        all run with the clock paused.

        A running timer is paused first; time accumulated before the call
        is discarded.

        Args:
            n (int): The number of iterations, at least 1.
            supplier: Zero-argument callable producing the input for one
                iteration.
            function: The function being timed. Its return value is passed
                to `post`.
            pre: Optional callable mapping the supplied value to the value
                handed to `function`.
            post: Optional callable applied to the result of `function`,
                typically to validate it.

        Returns:
            The mean time of `function` in milliseconds.
        """
        if n < 1:
            raise ProgrammerError(f"repeat requires at least one run, got {n}")

        logger.debug("repeat: with %d runs", n)
        if self._running:
            self.pause()
        self.reset()
        for _ in range(n):
            value = supplier()
            if pre is not None:
                value = pre(value)
            self.resume()
            try:
                result = function(value)
            finally:
                self.pause_and_lap()
            if post is not None:
                post(result)

        return self.mean_lap_time()
