"""Biased six-sided die."""

from __future__ import annotations

import math
import random

BIAS_EXPONENT = 0.9
DRAWS = 3


def roll_die(rng: random.Random | None = None) -> int:
    """Roll a die whose faces are deliberately not equally likely.

    Three uniform draws are averaged (pulling toward the middle), the
    average is raised to ``BIAS_EXPONENT`` and scaled onto 1–6.
    Pass a seeded ``random.Random`` for reproducible rolls.
    """
    source = rng if rng is not None else random
    combined = sum(source.random() for _ in range(DRAWS)) / DRAWS
    biased = combined ** BIAS_EXPONENT
    value = math.floor(biased * 6) + 1
    return max(1, min(6, value))
