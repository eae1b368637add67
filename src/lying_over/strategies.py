"""Ways to pick one maximal ideal out of several.

Lying over only promises *some* prime above ``P``; which one comes back is
decided by the strategy passed to `lift_prime` / `going_up`.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np

from .errors import ContractViolation
from .rings import Ideal

Strategy = Callable[[Sequence[Ideal]], Ideal]


def _require_candidates(candidates: Sequence[Ideal]) -> None:
    if not candidates:
        raise ContractViolation("no candidate ideals to choose from")


def choose_first(candidates: Sequence[Ideal]) -> Ideal:
    _require_candidates(candidates)
    return candidates[0]


def choose_last(candidates: Sequence[Ideal]) -> Ideal:
    _require_candidates(candidates)
    return candidates[-1]


def choose_by(key: Callable[[Ideal], Any]) -> Strategy:
    """Strategy returning the candidate with the smallest `key`."""

    def choose(candidates: Sequence[Ideal]) -> Ideal:
        _require_candidates(candidates)
        return min(candidates, key=key)

    return choose


class RandomChoice:
    """Uniform choice driven by a NumPy generator (reproducible with `seed`)."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def __call__(self, candidates: Sequence[Ideal]) -> Ideal:
        _require_candidates(candidates)
        return candidates[int(self._rng.integers(len(candidates)))]

    def __repr__(self) -> str:
        return f"RandomChoice(seed={self.seed!r})"
