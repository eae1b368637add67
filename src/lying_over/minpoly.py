"""Minimal polynomials of elements of an integral extension."""

from __future__ import annotations

import itertools
import logging
from typing import Any, List

import sympy as sp

from .errors import ContractViolation
from .integrality import IntegralExtension
from .polynomial import Polynomial

logger = logging.getLogger(__name__)


def _monic_divisors(expr: sp.Expr, T: sp.Symbol, modulus: int) -> List[sp.Expr]:
    """Monic divisors of positive degree, by increasing degree.

    Factors over GF(modulus) for a prime modulus and over the rationals
    for modulus 0.
    """
    if modulus:
        _, factors = sp.factor_list(expr, T, modulus=modulus)
        factors = [(sp.Poly(g, T, modulus=modulus).monic(), e) for g, e in factors]
        one = sp.Poly(1, T, modulus=modulus)
    else:
        _, factors = sp.factor_list(expr, T)
        factors = [(sp.Poly(g, T, domain=sp.QQ).monic(), e) for g, e in factors]
        one = sp.Poly(1, T, domain=sp.QQ)

    divisors = []
    for exponents in itertools.product(*[range(e + 1) for _, e in factors]):
        d = one
        for (g, _), k in zip(factors, exponents):
            d = d * g ** k
        if d.degree() > 0:
            divisors.append(d)
    divisors.sort(key=lambda d: d.degree())
    return [d.as_expr() for d in divisors]


def _search_residues(integral: IntegralExtension, s: Any, modulus: int) -> Polynomial:
    """First monic annihilator over ``Z/(modulus)`` by degree, then coefficients.

    ``Z/(modulus)`` is not a field for composite `modulus`, so annihilators are
    not governed by a factorization of the characteristic polynomial.
    """
    R = integral.source
    for d in range(1, integral.target.rank):
        for lower in itertools.product(range(modulus), repeat=d):
            p = Polynomial.from_ints(R, lower + (1,))
            if p.evaluate(integral.algebra_map, s).is_zero():
                return p
    return integral.witness(s)


def minimal_polynomial(integral: IntegralExtension, s: Any) -> Polynomial:
    """Monic polynomial of least degree over the base that vanishes at `s`.

    Over a field ``GF(c)`` or in characteristic 0 the candidates are the monic
    divisors of the characteristic polynomial of `s`, and the result is
    irreducible when the target is a domain. For a composite characteristic
    ``c`` the monic polynomials over ``Z/(c)`` are searched by degree; there
    the least degree is unique but the polynomial need not be, and the one with
    the smallest coefficient representatives (constant term first) is
    returned.
    """
    s = integral.target(s)
    R = integral.source
    T = sp.Symbol("T")
    charpoly = integral.witness(s)

    c = R.characteristic
    if c and not sp.isprime(c):
        p = _search_residues(integral, s, c)
        logger.debug("minimal polynomial of %s over %s: %s", s, R, p)
        return p

    if c:
        coeffs = []
        for a in charpoly.coefficients:
            num, den = sp.fraction(sp.Rational(a.to_sympy()))
            coeffs.append(int(num) * pow(int(den), -1, c) % c)
        expr = sum((k * T ** i for i, k in enumerate(coeffs)), sp.Integer(0))
        candidates = _monic_divisors(expr, T, c)
    else:
        candidates = _monic_divisors(charpoly.to_sympy("T"), T, 0)

    for expr in candidates:
        try:
            p = Polynomial.from_sympy(R, expr, "T")
        except ContractViolation:
            # rational coefficients outside the base
            continue
        if p.evaluate(integral.algebra_map, s).is_zero():
            logger.debug("minimal polynomial of %s: %s", s, expr)
            return p
    raise RuntimeError(f"no divisor of the characteristic polynomial of {s} vanishes at it")
