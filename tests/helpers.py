"""Test helpers shared across modules.

Groups are built from a seeded random.Random so every run sees the same
numbers; the RandomSource used for resampling is seeded separately.
"""

import random


def noisy_group(center, spread, count, seed):
    """Response times around 'center' seconds, never negative."""
    gen = random.Random(seed)
    return [abs(gen.gauss(center, spread)) for _ in range(count)]


def timing_file(reference, candidate, header="# recorded timings"):
    """Renders two groups in the stdin format the cli reads."""
    assert len(reference) == len(candidate)
    lines = [header, str(len(reference))]
    lines.append(" ".join(f"{v:.6f}" for v in reference))
    lines.append(" ".join(f"{v:.6f}" for v in candidate))
    return "\n".join(lines) + "\n"
