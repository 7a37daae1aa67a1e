# warmbench/errors.py
#
# Exceptions raised when the harness itself is misused. Failures raised by
# a workload (prepare, measure, verify) are never wrapped; they reach the
# caller unchanged.

class ProgrammerError(Exception):
    """Raised for invalid use of the benchmarking API, e.g. a run count below 1."""


class TimerError(ProgrammerError):
    """Raised when a Timer is driven out of order (stop before start, etc.)."""
