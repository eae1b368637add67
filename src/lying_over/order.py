"""Order relations between ideals and their comaps.

The witnesses of `lying_over.witness` turn into statements about ``comap``:
a nonzero ideal containing a root of a nonzero polynomial has a nonzero comap,
a strict inclusion of primes stays strict after taking comaps, and maximality
passes back and forth along an integral extension.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .certificates import PrimeIdeal
from .errors import ContractViolation
from .integrality import IntegralExtension
from .polynomial import Polynomial
from .rings import Ideal, RingElement, RingHom
from .witness import find_difference_witness, find_witness, find_witness_in_domain


@dataclass(frozen=True, eq=False)
class ComapWitness:
    """``comap`` is not the zero ideal: it contains the nonzero `element`."""

    comap: Ideal
    element: RingElement
    index: int


@dataclass(frozen=True, eq=False)
class StrictInclusion:
    """``smaller < larger``, separated by `element` (a coefficient of ``X^index``)."""

    smaller: Ideal
    larger: Ideal
    element: RingElement
    index: int


def comap_nonzero(algebra_map: RingHom, ideal: Ideal, r: Any, p: Polynomial) -> ComapWitness:
    found = find_witness(algebra_map, r, ideal, p)
    comap = algebra_map.comap(ideal)
    if comap.is_bot():
        raise RuntimeError(f"comap of {ideal} is zero despite the witness {found.coefficient}")
    return ComapWitness(comap, found.coefficient, found.index)


def comap_strict_mono(
    algebra_map: RingHom,
    lower: PrimeIdeal,
    upper: Ideal,
    r: Any,
    p: Polynomial,
) -> StrictInclusion:
    found = find_difference_witness(algebra_map, lower, upper, r, p)
    smaller = algebra_map.comap(lower.ideal)
    larger = algebra_map.comap(upper)
    if not smaller < larger:
        raise RuntimeError(f"{smaller} is not strictly contained in {larger}")
    return StrictInclusion(smaller, larger, found.coefficient, found.index)


def comap_nonzero_of_integral(integral: IntegralExtension, ideal: Ideal, r: Any) -> ComapWitness:
    """`comap_nonzero` in a domain, with the polynomial supplied by integrality."""
    r = integral.target(r)
    p = integral.witness(r)
    found = find_witness_in_domain(integral.algebra_map, r, ideal, p)
    return ComapWitness(integral.algebra_map.comap(ideal), found.coefficient, found.index)


def comap_strict_mono_of_integral(
    integral: IntegralExtension,
    lower: PrimeIdeal,
    upper: Ideal,
    r: Any,
) -> StrictInclusion:
    """`comap_strict_mono`; a monic witness never vanishes modulo a proper ideal."""
    return comap_strict_mono(integral.algebra_map, lower, upper, r, integral.witness(r))


def nonzero_comap_of_nonzero_ideal(integral: IntegralExtension, ideal: Ideal) -> Optional[ComapWitness]:
    """Witness that ``comap(ideal)`` is nonzero, or None when `ideal` is zero.

    The target must be a domain, so that a zero comap forces a zero ideal.
    """
    if not integral.target.is_domain():
        raise ContractViolation(f"{integral.target} is not a domain")
    if ideal.is_bot():
        return None
    return comap_nonzero_of_integral(integral, ideal, ideal.generators()[0])


def maximal_comap_of_maximal(integral: IntegralExtension, ideal: Ideal) -> Ideal:
    """The comap of a maximal ideal along an integral map is maximal."""
    if not ideal.is_maximal():
        raise ContractViolation(f"{ideal} is not maximal in {ideal.ring}")
    comap = integral.algebra_map.comap(ideal)
    if not comap.is_maximal():
        raise RuntimeError(f"comap {comap} of the maximal ideal {ideal} is not maximal")
    return comap


def maximal_of_maximal_comap(integral: IntegralExtension, prime: PrimeIdeal) -> Ideal:
    """A prime whose comap along an integral map is maximal is itself maximal."""
    comap = integral.algebra_map.comap(prime.ideal)
    if not comap.is_maximal():
        raise ContractViolation(f"comap {comap} of {prime} is not maximal")
    if not prime.ideal.is_maximal():
        raise RuntimeError(f"{prime} lies over a maximal ideal but is not maximal")
    return prime.ideal
