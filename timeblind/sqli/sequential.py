# sequential.py: grows both groups one observation at a time and re-runs the
# bootstrap test after every step, stopping as soon as the test rejects

import enum
import logging
from dataclasses import dataclass, field

from .bootstrap import run_hypothesis_test
from .config import (
    BOOTSTRAP_SAMPLES,
    SIGNIFICANCE_ALPHA,
    INITIAL_SAMPLE_SIZE,
    MAX_SAMPLE_SIZE,
)
from .errors import ConfigurationError, InsufficientDataError
from .reporting import log_round

logger = logging.getLogger("TimeBlind")


class DriverState(enum.Enum):
    ACCUMULATING = "accumulating"
    REJECTED = "rejected"      # timing difference found, injection likely
    EXHAUSTED = "exhausted"    # budget used up without a difference


@dataclass
class SequentialResult:
    state: DriverState
    size: int
    rounds: int
    history: list = field(default_factory=list)
    reference: list = field(default_factory=list)
    candidate: list = field(default_factory=list)

    @property
    def rejected(self):
        return self.state is DriverState.REJECTED

    @property
    def last_test(self):
        return self.history[-1] if self.history else None


class SequentialDriver:
    """
    Early-stopping sequential bootstrap test.

    Starts with initial_size observations per group and tests; on a
    non-rejection takes one more observation from each sampler and tests
    again, up to max_size observations per group. Both samplers are read in
    arrival order and the groups always have the same size when tested.
    """

    def __init__(self, reference, candidate, rng,
                 initial_size=INITIAL_SAMPLE_SIZE,
                 max_size=MAX_SAMPLE_SIZE,
                 alpha=SIGNIFICANCE_ALPHA,
                 bootstrap_samples=BOOTSTRAP_SAMPLES,
                 progress_callback=None):
        if initial_size < 1:
            raise ConfigurationError(f"initial sample size must be at least 1, got {initial_size}")
        if max_size < initial_size:
            raise ConfigurationError(
                f"maximum sample size ({max_size}) is below the initial size ({initial_size})"
            )

        self.reference = reference
        self.candidate = candidate
        self.rng = rng
        self.initial_size = initial_size
        self.max_size = max_size
        self.alpha = alpha
        self.bootstrap_samples = bootstrap_samples
        self.progress_callback = progress_callback  # (round, current_size, max_size)

        self.state = DriverState.ACCUMULATING
        self.x = []
        self.y = []
        self.history = []

    def check_backlogs(self):
        # both groups, not just the reference one; live samplers report None and pass
        for label, sampler in (("reference", self.reference), ("candidate", self.candidate)):
            available = sampler.remaining()
            if available is not None and available < self.max_size:
                raise InsufficientDataError(label, available, self.max_size)

    def run(self):
        if self.state is not DriverState.ACCUMULATING or self.history:
            raise RuntimeError("a SequentialDriver can only be run once")

        self.check_backlogs()

        self.x = list(self.reference.take_next(self.initial_size))
        self.y = list(self.candidate.take_next(self.initial_size))
        current_size = self.initial_size

        logger.info("Starting sequential test: %d -> %d observations per group, alpha=%s, seed=%s",
                    self.initial_size, self.max_size, self.alpha, getattr(self.rng, "seed", None))

        while current_size <= self.max_size:
            result = run_hypothesis_test(self.x, self.y, self.rng,
                                         alpha=self.alpha, samples=self.bootstrap_samples)
            self.history.append(result)
            log_round(len(self.history), result)

            if result.rejected:
                self.state = DriverState.REJECTED
                break

            # tested at the full budget, asking for more would overrun the backlog
            if current_size == self.max_size:
                self.state = DriverState.EXHAUSTED
                break

            self.x.extend(self.reference.take_next(1))
            self.y.extend(self.candidate.take_next(1))
            current_size += 1

            if self.progress_callback:
                self.progress_callback(len(self.history), current_size, self.max_size)

        return SequentialResult(
            state=self.state,
            size=current_size,
            rounds=len(self.history),
            history=list(self.history),
            reference=list(self.x),
            candidate=list(self.y),
        )
