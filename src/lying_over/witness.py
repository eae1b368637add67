"""Coefficient witnesses.

If ``r`` lies in an ideal ``I`` of ``S``, is not a zero divisor and is a root
of a nonzero polynomial ``p`` over ``R``, then some nonzero coefficient of
``p`` lies in ``comap(I)``: write ``p = q*X + c``; if ``c != 0`` it equals
``-q(r)*r`` and so lies in ``I``; otherwise ``q(r)*r = 0`` and ``r`` can be
cancelled, so ``q`` is a shorter polynomial with the same root.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .certificates import PrimeIdeal
from .errors import ContractViolation, NoWitnessError, RingMismatchError
from .polynomial import Polynomial
from .rings import Ideal, RingElement, RingHom

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CoefficientWitness:
    """Nonzero coefficient of ``X^index`` that lies in the comap of the ideal."""

    index: int
    coefficient: RingElement


def _is_non_zero_divisor(a: RingElement) -> bool:
    return not a.ring.is_zero_divisor(a)


def _is_nonzero(a: RingElement) -> bool:
    return not a.is_zero()


def _check_inputs(algebra_map: RingHom, r: RingElement, ideal: Ideal, p: Polynomial) -> None:
    if ideal.ring != algebra_map.target:
        raise RingMismatchError(f"{ideal} is not an ideal of {algebra_map.target}")
    if p.ring != algebra_map.source:
        raise RingMismatchError(f"polynomial has coefficients in {p.ring}, expected {algebra_map.source}")
    if r not in ideal:
        raise ContractViolation(f"{r} is not in {ideal}")
    if p.is_zero():
        raise ContractViolation("the polynomial must be nonzero")
    if not p.evaluate(algebra_map, r).is_zero():
        raise ContractViolation(f"{r} is not a root of {p}")


def find_witness(
    algebra_map: RingHom,
    r: Any,
    ideal: Ideal,
    p: Polynomial,
    *,
    is_non_zero_divisor: Optional[Callable[[RingElement], bool]] = None,
) -> CoefficientWitness:
    """Find a nonzero coefficient of `p` in ``comap(ideal)``.

    Parameters
    ----------
    algebra_map:
        The map ``R -> S``; `p` has coefficients in ``R``.
    r:
        Element of ``ideal`` with ``p(r) = 0`` along `algebra_map`.
    is_non_zero_divisor:
        Predicate on elements of ``S``; defaults to the exact zero-divisor test
        of the ring. `r` must satisfy it.

    Raises
    ------
    ContractViolation
        If any precondition fails.
    NoWitnessError
        If the search exhausts the coefficients.
    """
    r = algebra_map.target(r)
    _check_inputs(algebra_map, r, ideal, p)
    if is_non_zero_divisor is None:
        is_non_zero_divisor = _is_non_zero_divisor
    if not is_non_zero_divisor(r):
        raise ContractViolation(f"{r} is a zero divisor of {algebra_map.target}")

    current, index = p, 0
    for _ in range(p.degree + 1):
        rest, constant = current.split_constant()
        if not constant.is_zero():
            if algebra_map(constant) not in ideal:
                raise RuntimeError(f"coefficient {constant} does not lie over {ideal}")
            logger.debug("witness for %s: coefficient %s of X^%d", ideal, constant, index)
            return CoefficientWitness(index, constant)
        # constant = 0 gives rest(r) * r = 0, and r cancels.
        current, index = rest, index + 1
    raise NoWitnessError(f"no nonzero coefficient of {p} found")


def find_witness_in_domain(algebra_map: RingHom, r: Any, ideal: Ideal, p: Polynomial) -> CoefficientWitness:
    """`find_witness` for a domain ``S``, where every nonzero `r` can be cancelled."""
    r = algebra_map.target(r)
    if not algebra_map.target.is_domain():
        raise ContractViolation(f"{algebra_map.target} is not a domain")
    if r.is_zero():
        raise ContractViolation("r must be nonzero")
    return find_witness(algebra_map, r, ideal, p, is_non_zero_divisor=_is_nonzero)


def find_difference_witness(
    algebra_map: RingHom,
    lower: PrimeIdeal,
    upper: Ideal,
    r: Any,
    p: Polynomial,
) -> CoefficientWitness:
    """Find ``i`` with ``p.coeff(i)`` in ``comap(upper)`` but not in ``comap(lower)``.

    Requires ``lower <= upper``, `r` in ``upper`` but not in ``lower``,
    ``p(r)`` in ``lower`` and `p` nonzero modulo ``comap(lower)``. The search
    runs in the domain ``S/lower`` over ``R/comap(lower)``.
    """
    S = algebra_map.target
    r = S(r)
    if lower.ring != S or upper.ring != S:
        raise RingMismatchError(f"both ideals must belong to {S}")
    if not lower.ideal <= upper:
        raise ContractViolation(f"{lower} is not contained in {upper}")
    if r not in upper or r in lower:
        raise ContractViolation(f"{r} must lie in {upper} but not in {lower}")
    if p.evaluate(algebra_map, r) not in lower:
        raise ContractViolation(f"{p} evaluated at {r} is not in {lower}")

    below = algebra_map.comap(lower.ideal)
    bar = algebra_map.quotient(lower.ideal)
    to_base = algebra_map.source.quotient_map(below)
    to_top = S.quotient_map(lower.ideal)
    p_bar = p.map_coefficients(to_base)
    if p_bar.is_zero():
        raise ContractViolation(f"{p} vanishes modulo {below}")

    found = find_witness_in_domain(bar, to_top(r), to_top.map_ideal(upper), p_bar)
    coefficient = p.coeff(found.index)
    if algebra_map(coefficient) not in upper or algebra_map(coefficient) in lower:
        raise RuntimeError(f"coefficient {coefficient} does not separate the comaps")
    return CoefficientWitness(found.index, coefficient)
