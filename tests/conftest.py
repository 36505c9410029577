"""Shared fixtures for the timing test suite.

for importable helpers, use:
  from helpers import noisy_group, timing_file
"""

import pytest

from timeblind.sqli.random_source import RandomSource

SEED = 20240607


@pytest.fixture
def rng():
    return RandomSource(SEED)
