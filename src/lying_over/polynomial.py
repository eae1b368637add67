"""Univariate polynomials over a `CommRing` and their evaluation along ring maps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

import sympy as sp

from .errors import ContractViolation
from .rings import CommRing, RingElement, RingHom


@dataclass(frozen=True)
class Polynomial:
    """Polynomial with coefficients in `ring`; ``coefficients[i]`` multiplies ``X^i``.

    Trailing zero coefficients are dropped on construction, so the zero
    polynomial has no coefficients and degree -1.
    """

    ring: CommRing
    coefficients: Tuple[RingElement, ...]

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        coeffs = [self.ring(c) for c in self.coefficients]
        while coeffs and coeffs[-1].is_zero():
            coeffs.pop()
        object.__setattr__(self, "coefficients", tuple(coeffs))

    @classmethod
    def from_ints(cls, ring: CommRing, coeffs: Sequence[int]) -> "Polynomial":
        return cls(ring, tuple(ring.from_int(c) for c in coeffs))

    @classmethod
    def from_sympy(cls, ring: CommRing, expr: Any, variable: str = "X") -> "Polynomial":
        """Parse e.g. ``"X**2 - 2*x*X + 1"``; coefficients may involve the ring variable."""
        X = sp.Symbol(variable)
        if isinstance(expr, str):
            expr = sp.sympify(
                expr.replace("^", "**"),
                locals={variable: X, ring.variable: ring.symbol},
            )
        try:
            poly = sp.Poly(sp.expand(expr), X)
        except sp.PolynomialError as exc:
            raise ContractViolation(f"{expr} is not a polynomial in {variable}") from exc
        return cls(ring, tuple(ring(c) for c in reversed(poly.all_coeffs())))

    def to_sympy(self, variable: str = "X") -> sp.Expr:
        X = sp.Symbol(variable)
        return sp.expand(sum((c.to_sympy() * X ** i for i, c in enumerate(self.coefficients)), sp.Integer(0)))

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def coeff(self, i: int) -> RingElement:
        if 0 <= i < len(self.coefficients):
            return self.coefficients[i]
        return self.ring.zero

    @property
    def leading_coefficient(self) -> RingElement:
        if self.is_zero():
            return self.ring.zero
        return self.coefficients[-1]

    def is_zero(self) -> bool:
        return not self.coefficients

    def is_monic(self) -> bool:
        return not self.is_zero() and self.leading_coefficient == self.ring.one

    def split_constant(self) -> Tuple["Polynomial", RingElement]:
        """Return ``(q, c)`` with ``self = q*X + c``."""
        return Polynomial(self.ring, self.coefficients[1:]), self.coeff(0)

    def evaluate(self, hom: RingHom, r: Any) -> RingElement:
        """Value at `r` (an element of ``hom.target``) of the polynomial mapped by `hom`."""
        if hom.source != self.ring:
            raise ContractViolation(f"cannot evaluate a polynomial over {self.ring} along a map from {hom.source}")
        r = hom.target(r)
        acc = hom.target.zero
        for c in reversed(self.coefficients):
            acc = acc * r + hom(c)
        return acc

    def map_coefficients(self, hom: RingHom) -> "Polynomial":
        return Polynomial(hom.target, tuple(hom(c) for c in self.coefficients))

    def __str__(self) -> str:
        return sp.sstr(self.to_sympy())
