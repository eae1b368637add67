"""Lying over: primes of ``S`` above a given prime of ``R``.

For an integral extension ``f : R -> S`` and a prime ``P`` of ``R`` with
``ker f <= P``, localize both rings at the complement of ``P``. ``S_P`` is
nonzero and integral over the local ring ``R_P``, so any maximal ideal of
``S_P`` contracts to the maximal ideal ``P R_P``; pulling it back to ``S``
gives a prime lying over ``P``.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .certificates import PrimeIdeal
from .errors import ContractViolation, RingMismatchError
from .integrality import IntegralExtension, LocalizedExtension
from .rings import Ideal
from .strategies import Strategy, choose_first

logger = logging.getLogger(__name__)


def _localized_candidates(
    integral: IntegralExtension, prime: PrimeIdeal
) -> Tuple[LocalizedExtension, List[Ideal]]:
    f = integral.algebra_map
    if prime.ring != f.source:
        raise RingMismatchError(f"{prime} is not an ideal of {f.source}")

    kernel = f.kernel()
    if not kernel <= prime.ideal:
        raise ContractViolation(f"kernel {kernel} of {f} is not contained in {prime}")

    local = integral.localize(prime)
    S_P = local.integral.target
    if S_P.is_zero_ring():
        raise RuntimeError(f"{S_P} is the zero ring although the kernel lies in {prime}")

    candidates = S_P.maximal_ideals()
    logger.debug("%d maximal ideal(s) of %s", len(candidates), S_P)
    return local, candidates


def _pull_back(
    integral: IntegralExtension,
    prime: PrimeIdeal,
    local: LocalizedExtension,
    chosen: Ideal,
    verify: bool,
) -> PrimeIdeal:
    if verify:
        below = local.integral.algebra_map.comap(chosen)
        if not below.is_maximal():
            raise RuntimeError(f"comap {below} of the maximal ideal {chosen} is not maximal")
        R_P = local.integral.source
        if R_P.maximal_ideals() != [below]:
            raise RuntimeError(f"{below} is not the maximal ideal of the local ring {R_P}")

    lifted = PrimeIdeal.certify(local.extension_map.comap(chosen))
    logger.debug("pulled %s back to %s", chosen, lifted)
    if lifted.ideal.comap(integral.algebra_map) != prime.ideal:
        raise RuntimeError(f"{lifted} does not lie over {prime}")
    return lifted


def lift_prime(
    integral: IntegralExtension,
    prime: PrimeIdeal,
    *,
    strategy: Strategy = choose_first,
    verify: bool = True,
) -> PrimeIdeal:
    """Return a prime ``Q`` of the target with ``comap(Q) == prime``.

    Parameters
    ----------
    integral:
        Certificate for ``f : R -> S``.
    prime:
        Prime of ``R`` containing ``ker f``.
    strategy:
        Picks the maximal ideal of ``S_P`` that is pulled back.
    verify:
        Also check that the chosen ideal contracts to the maximal ideal of
        ``R_P``. The final ``comap(Q) == prime`` check always runs.

    Raises
    ------
    ContractViolation
        If ``ker f`` is not contained in `prime`, or the strategy returns an
        ideal that was not offered.
    """
    local, candidates = _localized_candidates(integral, prime)
    chosen = strategy(candidates)
    if chosen not in candidates:
        raise ContractViolation(f"strategy returned {chosen}, which is not a maximal ideal of {local.integral.target}")
    logger.debug("chose %s", chosen)
    return _pull_back(integral, prime, local, chosen, verify)


def lying_over_primes(integral: IntegralExtension, prime: PrimeIdeal, *, verify: bool = True) -> List[PrimeIdeal]:
    """Every prime produced by `lift_prime`, one per maximal ideal of ``S_P``."""
    local, candidates = _localized_candidates(integral, prime)
    return [_pull_back(integral, prime, local, chosen, verify) for chosen in candidates]
