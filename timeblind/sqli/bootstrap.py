"""
Module: bootstrap.py
--------------------
Bootstrap significance test for two groups of response times.

The null hypothesis is that both groups share the same mean latency. Both
groups are resampled with replacement many times, the mean difference of every
resampled pair is recorded and a percentile confidence interval is read off the
sorted replicates. The null hypothesis is rejected when zero falls outside the
interval, which for a reference request against a delay payload means the
payload most likely reached the database.

Group order does not matter: swapping the groups flips the sign of every
replicate and therefore of the interval, but not whether it contains zero.
"""

import math
from dataclasses import dataclass

from .config import BOOTSTRAP_SAMPLES, SIGNIFICANCE_ALPHA
from .errors import EmptyGroupError


@dataclass(frozen=True)
class HypothesisTest:
    """Outcome of one bootstrap test on the current groups."""
    interval: tuple
    rejected: bool
    size: int

    @property
    def lower(self):
        return self.interval[0]

    @property
    def upper(self):
        return self.interval[1]


def mean(values):
    # arithmetic mean, callers must never hand in an empty group
    if not values:
        raise EmptyGroupError("cannot average an empty group")
    return sum(values) / len(values)


def difference(x, y):
    return mean(x) - mean(y)


def resample(values, rng, size=None):
    """
    Draws a new group from 'values', uniformly with replacement.
    The result has len(values) elements unless 'size' says otherwise.
    """
    if not values:
        raise EmptyGroupError("cannot resample an empty group")
    if size is None:
        size = len(values)
    if size < 1:
        raise ValueError(f"resample size must be at least 1, got {size}")
    return rng.choose(values, size)


def bootstrap_distribution(x, y, rng, samples=BOOTSTRAP_SAMPLES):
    """
    Builds the empirical distribution of mean(x) - mean(y).

    Each replicate resamples x and then y from the shared random stream,
    so a fixed seed reproduces the exact same replicate set.
    Returns the replicates sorted ascending.
    """
    if samples < 1:
        raise ValueError(f"need at least one bootstrap replicate, got {samples}")

    replicates = []
    for _ in range(samples):
        x_sample = resample(x, rng)
        y_sample = resample(y, rng)
        replicates.append(difference(x_sample, y_sample))

    replicates.sort()
    return replicates


def percentile_interval(replicates, alpha=SIGNIFICANCE_ALPHA):
    """
    Two-sided percentile interval from a sorted replicate set.

    Indices are rounded outward (floor for the lower bound, ceil for the
    upper one) so the interval never covers less than 1 - alpha.
    """
    if not replicates:
        raise ValueError("cannot build an interval from an empty replicate set")
    if not 0 < alpha < 1:
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")

    count = len(replicates)
    half_alpha = alpha / 2
    lower_index = math.floor((count - 1) * half_alpha)
    upper_index = math.ceil((count - 1) * (1 - half_alpha))

    return replicates[lower_index], replicates[upper_index]


def run_hypothesis_test(x, y, rng, alpha=SIGNIFICANCE_ALPHA, samples=BOOTSTRAP_SAMPLES):
    """
    Runs the bootstrap test on the current groups.
    Returns a HypothesisTest; the replicate set itself is thrown away.
    """
    replicates = bootstrap_distribution(x, y, rng, samples=samples)
    lower, upper = percentile_interval(replicates, alpha)

    # zero inside the interval means we cannot tell the groups apart
    is_rejected = lower > 0 or upper < 0
    return HypothesisTest(interval=(lower, upper), rejected=is_rejected, size=len(x))


def rejected(x, y, rng, alpha=SIGNIFICANCE_ALPHA, samples=BOOTSTRAP_SAMPLES):
    # boolean shortcut for callers that only care about the verdict
    return run_hypothesis_test(x, y, rng, alpha=alpha, samples=samples).rejected
