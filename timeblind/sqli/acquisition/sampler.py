# where the observations come from
# the driver only ever calls take_next(n), so a recorded backlog and a live
# target look the same to it

import logging
from collections import deque

from ..errors import AcquisitionUnderflowError

logger = logging.getLogger("TimeBlind")


class Sampler:
    """
    Source of observations for one group (reference or candidate).

    Subclasses implement _acquire(n). take_next(n) checks the request and
    hands back exactly n observations in arrival order.
    """

    name = "sampler"

    def take_next(self, n):
        if n < 1:
            raise ValueError(f"must take at least one observation, got {n}")
        observations = self._acquire(n)
        if len(observations) != n:
            raise AcquisitionUnderflowError(
                f"{self.name}: asked for {n} observations, got {len(observations)}"
            )
        return observations

    def remaining(self):
        # None means the sampler can keep producing (live target)
        return None

    def _acquire(self, n):
        raise NotImplementedError


class BacklogSampler(Sampler):
    # pre-recorded observations, popped from the front in the order they were recorded

    def __init__(self, observations, name="backlog"):
        self.name = name
        self._backlog = deque(float(value) for value in observations)

    def remaining(self):
        return len(self._backlog)

    def _acquire(self, n):
        if len(self._backlog) < n:
            raise AcquisitionUnderflowError(
                f"{self.name}: backlog has {len(self._backlog)} observations left, {n} requested"
            )
        taken = [self._backlog.popleft() for _ in range(n)]
        logger.debug("%s: took %d observation(s), %d left", self.name, n, len(self._backlog))
        return taken
