# config.py: default configuration for the bootstrap timing test
# no config files and no command-line flags, a few environment variables
# can override the built-in values (handy for reproducible runs)

import os
import logging

from .errors import ConfigurationError

BOOTSTRAP_SAMPLES = 10000     # replicates drawn per hypothesis test
SIGNIFICANCE_ALPHA = 0.01     # two-sided, the interval covers 1 - alpha
INITIAL_SAMPLE_SIZE = 4       # observations per group before the first test
MAX_SAMPLE_SIZE = 60          # the driver gives up after testing at this size

SEED_ENV = "TIMEBLIND_SEED"
LOG_FILE_ENV = "TIMEBLIND_LOG_FILE"
LOG_LEVEL_ENV = "TIMEBLIND_LOG_LEVEL"


def _seed_from_environment(environ):
    raw = environ.get(SEED_ENV, "").strip()
    if not raw:
        return None  # fresh entropy every run
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{SEED_ENV} must be an integer, got {raw!r}") from None


def _level_from_environment(environ):
    level = environ.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"{LOG_LEVEL_ENV} is not a logging level: {level!r}")
    return level


def load_configuration(environ=None):
    # returns a dictionary with all default settings for the timing test
    if environ is None:
        environ = os.environ

    configuration = {
        "bootstrap": {
            "samples": BOOTSTRAP_SAMPLES,
            "alpha": SIGNIFICANCE_ALPHA,
        },
        "sample_budget": {
            "initial": INITIAL_SAMPLE_SIZE,
            "maximum": MAX_SAMPLE_SIZE,
        },
        "seed": _seed_from_environment(environ),
        "log_file": environ.get(LOG_FILE_ENV) or None,   # console only unless set
        "log_level": _level_from_environment(environ),
        "http": {
            "timeout": 30.0,  # delay payloads can take a while, keep this generous
        },
    }
    return configuration
