# the single random stream used by every resampling call in a run
# seeded from os entropy unless a fixed seed is given (tests, replays)

import random


class RandomSource:
    def __init__(self, seed=None):
        if seed is None:
            # draw a seed from the os so it can still be logged and replayed
            seed = random.SystemRandom().getrandbits(64)
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self):
        return self._seed

    def draw_index(self, n):
        """
        Returns a uniform integer in [0, n-1].
        """
        if n < 1:
            raise ValueError(f"bound must be at least 1, got {n}")
        return self._random.randrange(n)

    def choose(self, values, k):
        """
        k independent uniform draws with replacement from values.

        This is what the resampler calls: every bootstrap draw goes through
        here, on the same stream as draw_index. random.choices picks each
        index uniformly in [0, len(values) - 1] in one call, so a whole
        resample costs a single method call instead of k.
        """
        return self._random.choices(values, k=k)

    def __repr__(self):
        return f"RandomSource(seed={self._seed})"
