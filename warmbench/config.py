# warmbench/config.py
#
# Tunables for the timing protocol and the logging setup used by the
# command-line tools. The library modules only read the constants; handler
# configuration is left to whoever embeds the harness.

import logging
import os
import time

# Warmup sizing: max(MIN_WARMUP_RUNS, min(MAX_WARMUP_RUNS, m // WARMUP_DIVISOR))
MIN_WARMUP_RUNS = 2
MAX_WARMUP_RUNS = 10
WARMUP_DIVISOR = 10

# Monotonic clock in integer nanoseconds.
DEFAULT_CLOCK = time.perf_counter_ns
NANOS_PER_MILLI = 1_000_000

LOG_LEVEL_ENV = "WARMBENCH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_level(level):
    """
    Converts a level name (any case) or number to a numeric logging level.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return numeric


def configure_logging(level=None):
    """
    Configures the root logger for command-line use.

    A handler is only installed when the root logger has none, but the
    level is always applied.

    Args:
        level (str | int | None): Explicit level. Falls back to the
            WARMBENCH_LOG_LEVEL environment variable, then to INFO.

    Returns:
        The numeric level that was applied.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    level = parse_level(level)

    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level
