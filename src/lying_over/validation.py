"""Randomized sanity checks for ideals.

Primality is decided exactly by `Ideal.is_prime`; the checks here test the
defining properties directly on random elements, as an independent cross-check
of that decision procedure.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Dict, Optional

import numpy as np

from .rings import Ideal

logger = logging.getLogger(__name__)


def spot_check_prime(
    ideal: Ideal,
    n_samples: int = 200,
    seed: Optional[int] = None,
    *,
    bound: int = 10,
) -> Dict[str, Any]:
    """Test absorption and the prime property on random pairs of elements.

    Elements are drawn with cover coordinates uniform in ``[-bound, bound]``.

    Returns
    -------
    dict with keys
        ``n_samples``, ``proper``, ``absorption_failures``, ``prime_failures``,
        ``products_in_ideal`` and ``passed``.
    """
    ring = ideal.ring
    out: Dict[str, Any] = {
        "n_samples": int(n_samples),
        "proper": ideal.is_proper(),
        "absorption_failures": 0,
        "prime_failures": 0,
        "products_in_ideal": 0,
    }
    if n_samples <= 0:
        warnings.warn("spot_check_prime called with an empty sample; nothing was tested")
        out["passed"] = out["proper"]
        return out

    rng = np.random.default_rng(seed)
    samples = rng.integers(-int(bound), int(bound) + 1, size=(int(n_samples), 2, ring.rank))
    generators = ideal.generators()

    for a_vec, b_vec in samples:
        a = ring.element([int(v) for v in a_vec])
        b = ring.element([int(v) for v in b_vec])
        if any(a * g not in ideal for g in generators):
            out["absorption_failures"] += 1
        if a * b in ideal:
            out["products_in_ideal"] += 1
            if a not in ideal and b not in ideal:
                out["prime_failures"] += 1

    if out["products_in_ideal"] == 0:
        warnings.warn(f"no sampled product landed in {ideal}; the prime test was vacuous")

    out["passed"] = out["proper"] and out["absorption_failures"] == 0 and out["prime_failures"] == 0
    logger.debug("spot check of %s: %s", ideal, out)
    return out
