# warmbench/__init__.py

# Expose the timing protocol at the top-level package namespace.

from .benchmark import Benchmark, TimedBenchmark, warmup_runs
from .errors import ProgrammerError, TimerError
from .timer import Timer
