"""Integral-extension certificates.

Every ring in this package is finitely generated as a module over the image of
the integers, so a structure map ``R -> S`` out of a quotient of Z (or its
localization at the same prime as ``S``) is integral. `IntegralExtension`
records that fact and produces an explicit monic witness for each element: the
characteristic polynomial of multiplication by it (Cayley-Hamilton).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import sympy as sp

from .certificates import PrimeIdeal
from .errors import ContractViolation, NotIntegralError
from .polynomial import Polynomial
from .rings import CommRing, Ideal, LocalizedRing, RingHom

logger = logging.getLogger(__name__)

_TOKEN = object()


@dataclass(frozen=True)
class IntegralExtension:
    """Certificate that every element of ``algebra_map.target`` is integral."""

    algebra_map: RingHom
    _token: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _TOKEN:
            raise TypeError("IntegralExtension values are created with IntegralExtension.certify(map)")

    @classmethod
    def certify(cls, algebra_map: RingHom) -> "IntegralExtension":
        source, target = algebra_map.source, algebra_map.target
        if source.rank != 1:
            raise NotIntegralError(f"{target} is only known to be finite over quotients of the integers, not {source}")
        if isinstance(target, LocalizedRing):
            same = isinstance(source, LocalizedRing) and (
                source.residue_characteristic == target.residue_characteristic
            )
            if not same:
                raise NotIntegralError(f"{target} inverts integers that are not invertible in {source}")

        out = cls(algebra_map, _TOKEN)
        gen = target.gen
        if not out.witness(gen).evaluate(algebra_map, gen).is_zero():
            raise RuntimeError(f"characteristic polynomial of {gen} does not vanish at it")
        return out

    @classmethod
    def of(cls, ring: CommRing, base: Optional[CommRing] = None) -> "IntegralExtension":
        """Certificate for the structure map into `ring`."""
        return cls.certify(RingHom.structure_map(ring, base))

    @property
    def source(self) -> CommRing:
        return self.algebra_map.source

    @property
    def target(self) -> CommRing:
        return self.algebra_map.target

    def witness(self, s: Any) -> Polynomial:
        """Monic polynomial over the source that vanishes at `s` along the map."""
        s = self.target(s)
        n = self.target.rank
        T = sp.Symbol("T")
        charpoly = sp.Matrix(self.target.multiplication_matrix(s)).charpoly(T)
        # s = a/u and a is a root of T^n + c_{n-1} T^{n-1} + ... + c_0, so s is
        # a root of the polynomial with coefficients c_i / u^(n - i).
        coeffs = [int(c) for c in reversed(charpoly.all_coeffs())]
        u = s.denominator
        return Polynomial(
            self.source,
            tuple(self.source.element((c,), u ** (n - i)) for i, c in enumerate(coeffs)),
        )

    def localize(self, prime: PrimeIdeal) -> "LocalizedExtension":
        """Localize both rings at the complement of `prime`."""
        if prime.ring != self.source:
            raise ContractViolation(f"{prime} is not an ideal of {self.source}")
        p = prime.ideal.contraction()
        local = self.algebra_map.localize(p)
        logger.debug("localized %s -> %s at %s", self.source, self.target, p)
        if local == self.algebra_map:
            return LocalizedExtension(self.source.identity_map(), self.target.identity_map(), self)
        return LocalizedExtension(
            base_map=self.source.localization_map(p),
            extension_map=self.target.localization_map(p),
            integral=IntegralExtension.certify(local),
        )

    def quotient(self, ideal: Ideal) -> "IntegralExtension":
        """Certificate for ``source/comap(ideal) -> target/ideal``."""
        return IntegralExtension.certify(self.algebra_map.quotient(ideal))

    def __str__(self) -> str:
        return f"{self.target} over {self.source}"


@dataclass(frozen=True)
class LocalizedExtension:
    """``R -> R_P``, ``S -> S_P`` and the integral extension ``R_P -> S_P``."""

    base_map: RingHom
    extension_map: RingHom
    integral: IntegralExtension
