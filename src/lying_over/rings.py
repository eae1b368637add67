"""Commutative rings, ideals and ring homomorphisms.

All rings here are finite over (a quotient of) the integers and are presented
over a cover lattice ``Z^n``:

- `MonogenicRing` is ``Z[x]/(f)`` for a monic integer polynomial ``f`` of
  degree ``n``, modulo a further ideal (its *relations*). The integers are
  ``Z[x]/(x)`` and ``Z/(c)`` is that ring modulo ``(c)``.
- `LocalizedRing` inverts the images of the integers outside ``pZ`` in a
  `MonogenicRing` (every nonzero integer when ``p = 0``).

An element is a cover vector (coefficients of ``1, x, ..., x^{n-1}``) plus an
integer denominator; an ideal is a cover lattice in Hermite normal form that
contains the relations (and is saturated, for localized rings). A ring map is
an integer matrix between covers. Rings are immutable values: quotienting by
different ideals produces different rings, and combining values of different
rings raises `RingMismatchError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, List, Optional, Sequence, Tuple

import sympy as sp
from sympy.polys.polyerrors import BasePolynomialError

from . import lattice as lat
from .errors import ContractViolation, RingMismatchError


def _to_expr(value: Any, variable: str) -> sp.Expr:
    """Sympify user input; ``^`` is accepted as exponentiation."""
    if isinstance(value, str):
        text = value.replace("^", "**")
        return sp.sympify(text, locals={variable: sp.Symbol(variable)})
    return sp.sympify(value)


def _poly(coeffs: Sequence[int], x: sp.Symbol) -> sp.Poly:
    """Build a Poly from coefficients ordered by increasing degree."""
    return sp.Poly.from_list([int(c) for c in reversed(coeffs)], x, domain=sp.ZZ)


def _vector(poly: sp.Poly, n: int) -> lat.Vector:
    coeffs = [int(c) for c in reversed(poly.all_coeffs())]
    if len(coeffs) > n and any(coeffs[n:]):
        raise ValueError("polynomial is not reduced modulo the defining polynomial")
    coeffs = coeffs[:n]
    return tuple(coeffs + [0] * (n - len(coeffs)))


@lru_cache(maxsize=None)
def _cover_prime_lattices(modulus: lat.Vector, p: int) -> Tuple[lat.Basis, ...]:
    """Prime ideals of ``Z[x]/(f)`` lying over ``pZ``.

    Over a prime ``p`` these are ``(p, g(x))`` for the irreducible factors
    ``g`` of ``f mod p``; over ``0`` they are the saturations of ``(g(x))`` for
    the irreducible factors of ``f`` over the rationals.
    """
    x = sp.Symbol("x")
    n = len(modulus) - 1
    f = _poly(modulus, x)
    if p:
        _, factors = sp.factor_list(f.as_expr(), x, modulus=p)
    else:
        _, factors = sp.factor_list(f.as_expr(), x)

    out: List[lat.Basis] = []
    for g, _multiplicity in factors:
        g_poly = sp.Poly(g, x, domain=sp.ZZ)
        shift = sp.Poly(x, x, domain=sp.ZZ)
        gens = [_vector((g_poly * shift ** j).rem(f), n) for j in range(n)]
        if p:
            gens.extend(lat.scalar_matrix(p, n))
            out.append(lat.hnf(gens, n))
        else:
            out.append(lat.saturate(lat.hnf(gens, n), n))
    return tuple(out)


@dataclass(frozen=True, eq=False)
class RingElement:
    """An element of a `CommRing`.

    ``vector`` holds the cover coordinates of the numerator and
    ``denominator`` an integer that is a unit of the ring (always 1 outside
    localizations). Equality is decided by the ring.
    """

    ring: "CommRing"
    vector: lat.Vector
    denominator: int = 1

    __hash__ = None  # type: ignore[assignment]

    def _coerce(self, other: Any) -> "RingElement":
        return self.ring(other)

    def __add__(self, other: Any) -> "RingElement":
        return self.ring.add(self, self._coerce(other))

    __radd__ = __add__

    def __neg__(self) -> "RingElement":
        return self.ring.neg(self)

    def __sub__(self, other: Any) -> "RingElement":
        return self.ring.add(self, self.ring.neg(self._coerce(other)))

    def __rsub__(self, other: Any) -> "RingElement":
        return self.ring.add(self._coerce(other), self.ring.neg(self))

    def __mul__(self, other: Any) -> "RingElement":
        return self.ring.mul(self, self._coerce(other))

    __rmul__ = __mul__

    def __pow__(self, k: int) -> "RingElement":
        k = int(k)
        if k < 0:
            raise ContractViolation("only natural exponents are supported")
        out, base = self.ring.one, self
        while k:
            if k & 1:
                out = out * base
            base = base * base
            k >>= 1
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (RingElement, int, sp.Integer)):
            return NotImplemented
        try:
            return self.ring.equal(self, self._coerce(other))
        except RingMismatchError:
            return False

    def is_zero(self) -> bool:
        return self.ring.is_zero(self)

    def to_sympy(self) -> sp.Expr:
        return self.ring.to_sympy(self)

    def __str__(self) -> str:
        return sp.sstr(self.to_sympy())

    def __repr__(self) -> str:
        return f"<{self} in {self.ring}>"


class CommRing(ABC):
    """Shared behaviour of the concrete rings.

    Subclasses provide ``modulus`` (coefficients of the monic cover polynomial,
    lowest degree first), ``relations`` (HNF lattice of the zero ideal),
    ``variable`` and the methods marked abstract below.
    """

    modulus: lat.Vector
    relations: lat.Basis
    variable: str

    # -----------------------------
    # Subclass hooks
    # -----------------------------

    @abstractmethod
    def _saturate(self, basis: lat.Basis) -> lat.Basis:
        """Close a lattice under the ring's inverted denominators."""

    @abstractmethod
    def _check_denominator(self, denominator: int) -> None:
        """Raise unless `denominator` is invertible in the ring."""

    @abstractmethod
    def prime_ideals_over(self, p: int) -> List["Ideal"]:
        """Prime ideals whose contraction to the integers is ``pZ``."""

    @abstractmethod
    def maximal_ideals(self) -> List["Ideal"]:
        """All maximal ideals (the ring must have finitely many)."""

    @abstractmethod
    def is_prime_lattice(self, basis: lat.Basis) -> bool:
        ...

    @abstractmethod
    def is_maximal_lattice(self, basis: lat.Basis) -> bool:
        ...

    @abstractmethod
    def quotient(self, ideal: "Ideal") -> "CommRing":
        """The ring ``self / ideal``."""

    @abstractmethod
    def localize(self, characteristic: int) -> "LocalizedRing":
        """Invert the integers outside ``characteristic * Z``."""

    # -----------------------------
    # Cover arithmetic
    # -----------------------------

    @property
    def rank(self) -> int:
        return len(self.modulus) - 1

    @property
    def symbol(self) -> sp.Symbol:
        return sp.Symbol(self.variable)

    def _modulus_poly(self) -> sp.Poly:
        return _poly(self.modulus, self.symbol)

    def _unit_vector(self, j: int) -> lat.Vector:
        return tuple(int(i == j) for i in range(self.rank))

    def _cover_mul(self, u: Sequence[int], v: Sequence[int]) -> lat.Vector:
        x = self.symbol
        prod = (_poly(u, x) * _poly(v, x)).rem(self._modulus_poly())
        return _vector(prod, self.rank)

    def _ideal_lattice(self, vectors: Sequence[Sequence[int]]) -> lat.Basis:
        """Lattice of the ideal generated by the given cover vectors."""
        gens = [self._cover_mul(v, self._unit_vector(j)) for v in vectors for j in range(self.rank)]
        gens.extend(self.relations)
        return self._saturate(lat.hnf(gens, self.rank))

    # -----------------------------
    # Elements
    # -----------------------------

    def element(self, coeffs: Sequence[int], denominator: int = 1) -> RingElement:
        """Element with the given cover coefficients (lowest degree first)."""
        coeffs = tuple(int(c) for c in coeffs)
        if len(coeffs) != self.rank:
            raise ContractViolation(f"elements of {self} have {self.rank} coordinates")
        denominator = int(denominator)
        self._check_denominator(denominator)
        if denominator < 0:
            coeffs, denominator = tuple(-c for c in coeffs), -denominator
        reduced, _ = lat.reduce_vector(self.relations, coeffs)
        return RingElement(self, reduced, denominator)

    def from_int(self, k: int) -> RingElement:
        return self.element((int(k),) + (0,) * (self.rank - 1))

    def from_sympy(self, expr: sp.Expr) -> RingElement:
        """Element from a SymPy expression in the ring variable.

        The expression may be a polynomial with integer coefficients divided by
        an integer that is invertible in the ring.
        """
        x = self.symbol
        num, den = sp.fraction(sp.together(sp.expand(expr)))
        if not den.is_Integer:
            raise ContractViolation(f"{expr} has a non-integer denominator")
        try:
            poly = sp.Poly(num, x, domain=sp.ZZ)
        except BasePolynomialError as exc:
            raise ContractViolation(f"cannot interpret {expr} as an element of {self}") from exc
        return self.element(_vector(poly.rem(self._modulus_poly()), self.rank), int(den))

    def __call__(self, value: Any) -> RingElement:
        if isinstance(value, RingElement):
            if value.ring != self:
                raise RingMismatchError(f"element of {value.ring} used in {self}")
            return value
        if isinstance(value, (int, sp.Integer)):
            return self.from_int(int(value))
        try:
            expr = _to_expr(value, self.variable)
        except sp.SympifyError as exc:
            raise ContractViolation(f"cannot parse {value!r}") from exc
        return self.from_sympy(expr)

    @property
    def zero(self) -> RingElement:
        return self.from_int(0)

    @property
    def one(self) -> RingElement:
        return self.from_int(1)

    @property
    def gen(self) -> RingElement:
        """Generator of the ring as an algebra over the integers (1 for quotients of Z)."""
        if self.rank == 1:
            return self.one
        return self.element(self._unit_vector(1))

    def add(self, a: RingElement, b: RingElement) -> RingElement:
        v = tuple(x * b.denominator + y * a.denominator for x, y in zip(a.vector, b.vector))
        return self.element(v, a.denominator * b.denominator)

    def neg(self, a: RingElement) -> RingElement:
        return self.element(tuple(-c for c in a.vector), a.denominator)

    def mul(self, a: RingElement, b: RingElement) -> RingElement:
        return self.element(self._cover_mul(a.vector, b.vector), a.denominator * b.denominator)

    def equal(self, a: RingElement, b: RingElement) -> bool:
        diff = tuple(x * b.denominator - y * a.denominator for x, y in zip(a.vector, b.vector))
        return lat.contains(self.relations, diff)

    def is_zero(self, a: RingElement) -> bool:
        return lat.contains(self.relations, a.vector)

    def to_sympy(self, a: RingElement) -> sp.Expr:
        x = self.symbol
        num = sum((int(c) * x ** i for i, c in enumerate(a.vector)), sp.Integer(0))
        return num / a.denominator

    def multiplication_matrix(self, a: RingElement) -> lat.Basis:
        """Cover matrix of ``v -> a*v`` acting on row vectors (numerator only)."""
        return tuple(self._cover_mul(a.vector, self._unit_vector(j)) for j in range(self.rank))

    def is_zero_divisor(self, a: RingElement) -> bool:
        """True iff ``a*b = 0`` for some nonzero ``b``."""
        a = self(a)
        ann = lat.preimage(self.multiplication_matrix(a), self.relations, self.rank)
        ann = self._saturate(lat.lattice_sum(ann, self.relations, self.rank))
        return ann != self.relations

    # -----------------------------
    # Ideals
    # -----------------------------

    def ideal(self, *generators: Any) -> "Ideal":
        """Ideal generated by the given elements (ints and strings are coerced)."""
        vectors = []
        for g in generators:
            a = self(g)
            vectors.append(a.vector)
        return Ideal(self, self._ideal_lattice(vectors))

    @property
    def zero_ideal(self) -> "Ideal":
        return Ideal(self, self.relations)

    @property
    def unit_ideal(self) -> "Ideal":
        return Ideal(self, lat.identity(self.rank))

    def contraction(self, basis: lat.Basis) -> int:
        """Nonnegative generator of ``lattice cap Z``."""
        pre = lat.preimage((self._unit_vector(0),), basis, 1)
        return pre[0][0] if pre else 0

    @property
    def characteristic(self) -> int:
        return self.contraction(self.relations)

    def is_zero_ring(self) -> bool:
        return lat.contains(self.relations, self._unit_vector(0))

    def is_domain(self) -> bool:
        return not self.is_zero_ring() and self.is_prime_lattice(self.relations)

    def identity_map(self) -> "RingHom":
        return RingHom(self, self, lat.identity(self.rank))

    def quotient_map(self, ideal: "Ideal") -> "RingHom":
        return RingHom(self, self.quotient(ideal), lat.identity(self.rank))

    def localization_map(self, characteristic: int) -> "RingHom":
        """``self -> self_(p)``; the identity on cover coordinates."""
        return RingHom(self, self.localize(characteristic), lat.identity(self.rank))

    def _format_relations(self) -> List[str]:
        return [sp.sstr(self.to_sympy(RingElement(self, row))) for row in self.relations]


@dataclass(frozen=True)
class MonogenicRing(CommRing):
    """The ring ``Z[x]/(f, relations)``.

    Parameters
    ----------
    modulus:
        Coefficients of the monic polynomial ``f``, lowest degree first.
    relations:
        Cover vectors generating the extra relations; they are closed to an
        ideal and stored in Hermite normal form.
    variable:
        Name of the generator used for printing and parsing.

    Examples
    --------
    >>> S = MonogenicRing((-2, 0, 1))          # Z[sqrt 2]
    >>> F5 = MonogenicRing.integers().quotient(MonogenicRing.integers().ideal(5))
    """

    modulus: lat.Vector
    relations: lat.Basis = ()
    variable: str = "x"

    def __post_init__(self) -> None:
        modulus = tuple(int(c) for c in self.modulus)
        if len(modulus) < 2 or modulus[-1] != 1:
            raise ContractViolation("modulus must be a monic polynomial of positive degree")
        object.__setattr__(self, "modulus", modulus)

        n = self.rank
        rels = [tuple(int(c) for c in row) for row in self.relations]
        if any(len(row) != n for row in rels):
            raise ContractViolation(f"relations must be vectors of length {n}")
        gens = [self._cover_mul(v, self._unit_vector(j)) for v in rels for j in range(n)]
        object.__setattr__(self, "relations", lat.hnf(gens, n))

    @classmethod
    def integers(cls) -> "MonogenicRing":
        return cls((0, 1))

    @classmethod
    def adjoin_root(cls, polynomial: Any, variable: str = "x") -> "MonogenicRing":
        """``Z[x]/(polynomial)`` for a monic integer polynomial in `variable`."""
        x = sp.Symbol(variable)
        try:
            poly = sp.Poly(_to_expr(polynomial, variable), x, domain=sp.ZZ)
        except BasePolynomialError as exc:
            raise ContractViolation(f"{polynomial} is not an integer polynomial in {variable}") from exc
        return cls(tuple(int(c) for c in reversed(poly.all_coeffs())), (), variable)

    def _saturate(self, basis: lat.Basis) -> lat.Basis:
        return basis

    def _check_denominator(self, denominator: int) -> None:
        if denominator not in (1, -1):
            raise ContractViolation(f"{denominator} is not invertible in {self}")

    @property
    def cover(self) -> "MonogenicRing":
        return MonogenicRing(self.modulus, (), self.variable)

    def prime_ideals_over(self, p: int) -> List["Ideal"]:
        p = int(p)
        if p < 0 or (p and not sp.isprime(p)):
            raise ContractViolation(f"{p} is neither 0 nor a rational prime")
        return [
            Ideal(self, basis)
            for basis in _cover_prime_lattices(self.modulus, p)
            if lat.is_sublattice(self.relations, basis)
        ]

    def maximal_ideals(self) -> List["Ideal"]:
        c = self.characteristic
        if c == 0:
            raise ContractViolation(
                f"{self} has a maximal ideal over every rational prime; localize it first"
            )
        out: List[Ideal] = []
        for q in sorted(sp.factorint(c)):
            out.extend(self.prime_ideals_over(q))
        return out

    def is_prime_lattice(self, basis: lat.Basis) -> bool:
        c = self.contraction(basis)
        if c == 1 or (c and not sp.isprime(c)):
            return False
        return any(P.lattice == basis for P in self.prime_ideals_over(c))

    def is_maximal_lattice(self, basis: lat.Basis) -> bool:
        return self.contraction(basis) != 0 and self.is_prime_lattice(basis)

    def quotient(self, ideal: "Ideal") -> "MonogenicRing":
        """The ring ``self / ideal``."""
        if ideal.ring != self:
            raise RingMismatchError(f"{ideal} is not an ideal of {self}")
        return MonogenicRing(self.modulus, ideal.lattice, self.variable)

    def localize(self, characteristic: int) -> "LocalizedRing":
        return LocalizedRing(self, int(characteristic))

    def __str__(self) -> str:
        if self.rank == 1:
            head = "ZZ"
            gens = [str(row[0]) for row in self.relations]
        else:
            head = f"ZZ[{self.variable}]"
            gens = [sp.sstr(self._modulus_poly().as_expr())] + self._format_relations()
        return head if not gens else f"{head}/({', '.join(gens)})"


@dataclass(frozen=True)
class LocalizedRing(CommRing):
    """A `MonogenicRing` with the integers outside ``pZ`` inverted.

    Ideals of the localization are stored as their contractions to `base`,
    which are exactly the ideals of `base` saturated with respect to the
    inverted integers.
    """

    base: MonogenicRing
    residue_characteristic: int
    relations: lat.Basis = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        p = int(self.residue_characteristic)
        if p < 0 or (p and not sp.isprime(p)):
            raise ContractViolation(f"cannot localize at {p}: not 0 or a rational prime")
        object.__setattr__(self, "residue_characteristic", p)
        object.__setattr__(
            self, "relations", lat.saturate_outside(self.base.relations, self.base.rank, p)
        )

    @property
    def modulus(self) -> lat.Vector:  # type: ignore[override]
        return self.base.modulus

    @property
    def variable(self) -> str:  # type: ignore[override]
        return self.base.variable

    def _saturate(self, basis: lat.Basis) -> lat.Basis:
        return lat.saturate_outside(basis, self.rank, self.residue_characteristic)

    def _check_denominator(self, denominator: int) -> None:
        p = self.residue_characteristic
        if denominator == 0 or (p and denominator % p == 0):
            raise ContractViolation(f"{denominator} is not invertible in {self}")

    def fraction(self, numerator: Any, denominator: int) -> RingElement:
        a = self.base(numerator)
        return self.element(a.vector, denominator)

    def prime_ideals(self) -> List["Ideal"]:
        """Primes of the localization: primes of `base` over 0 or over p."""
        p = self.residue_characteristic
        over = [0] if p == 0 else [0, p]
        out: List[Ideal] = []
        for q in over:
            for P in self.base.prime_ideals_over(q):
                if lat.is_sublattice(self.relations, P.lattice):
                    out.append(Ideal(self, P.lattice))
        return out

    def prime_ideals_over(self, p: int) -> List["Ideal"]:
        return [P for P in self.prime_ideals() if P.contraction() == int(p)]

    def maximal_ideals(self) -> List["Ideal"]:
        primes = self.prime_ideals()
        return [
            P
            for P in primes
            if not any(Q.lattice != P.lattice and lat.is_sublattice(P.lattice, Q.lattice) for Q in primes)
        ]

    def is_prime_lattice(self, basis: lat.Basis) -> bool:
        return any(P.lattice == basis for P in self.prime_ideals())

    def is_maximal_lattice(self, basis: lat.Basis) -> bool:
        return any(M.lattice == basis for M in self.maximal_ideals())

    def quotient(self, ideal: "Ideal") -> "LocalizedRing":
        """``(base / ideal)_(p)``; `ideal` is stored as a saturated lattice of `base`."""
        if ideal.ring != self:
            raise RingMismatchError(f"{ideal} is not an ideal of {self}")
        return LocalizedRing(self.base.quotient(Ideal(self.base, ideal.lattice)), self.residue_characteristic)

    def localize(self, characteristic: int) -> "LocalizedRing":
        """Localize further.

        Inverting the integers outside ``pZ`` and outside ``qZ`` for ``p != q``
        inverts every nonzero integer, so the result is either `self` or the
        localization of `base` at 0.
        """
        further = self.base.localize(characteristic)
        if further.residue_characteristic == self.residue_characteristic:
            return self
        return self.base.localize(0)

    def __str__(self) -> str:
        return f"({self.base})_({self.residue_characteristic})"


@dataclass(frozen=True)
class Ideal:
    """An ideal, stored as a cover lattice containing the ring's relations."""

    ring: CommRing
    lattice: lat.Basis

    def __post_init__(self) -> None:
        if not lat.is_sublattice(self.ring.relations, self.lattice):
            raise ContractViolation("an ideal must contain the relations of its ring")

    def _check_same_ring(self, other: "Ideal") -> None:
        if not isinstance(other, Ideal):
            raise TypeError(f"expected an Ideal, got {type(other).__name__}")
        if other.ring != self.ring:
            raise RingMismatchError(f"ideals of {self.ring} and {other.ring} cannot be compared")

    def __contains__(self, item: Any) -> bool:
        a = self.ring(item)
        return lat.contains(self.lattice, a.vector)

    def __le__(self, other: "Ideal") -> bool:
        self._check_same_ring(other)
        return lat.is_sublattice(self.lattice, other.lattice)

    def __lt__(self, other: "Ideal") -> bool:
        return self <= other and self.lattice != other.lattice

    def __ge__(self, other: "Ideal") -> bool:
        return other <= self

    def __gt__(self, other: "Ideal") -> bool:
        return other < self

    def __add__(self, other: "Ideal") -> "Ideal":
        self._check_same_ring(other)
        return Ideal(self.ring, self.ring._ideal_lattice(list(self.lattice) + list(other.lattice)))

    def __mul__(self, other: "Ideal") -> "Ideal":
        self._check_same_ring(other)
        products = [self.ring._cover_mul(u, v) for u in self.lattice for v in other.lattice]
        return Ideal(self.ring, self.ring._ideal_lattice(products))

    def is_bot(self) -> bool:
        return self.lattice == self.ring.relations

    def is_top(self) -> bool:
        return lat.contains(self.lattice, self.ring._unit_vector(0))

    def is_proper(self) -> bool:
        return not self.is_top()

    def is_prime(self) -> bool:
        return self.ring.is_prime_lattice(self.lattice)

    def is_maximal(self) -> bool:
        return self.ring.is_maximal_lattice(self.lattice)

    def contraction(self) -> int:
        return self.ring.contraction(self.lattice)

    def generators(self) -> List[RingElement]:
        """Lattice generators that are nonzero in the ring."""
        return [
            RingElement(self.ring, row)
            for row in self.lattice
            if not lat.contains(self.ring.relations, row)
        ]

    def comap(self, hom: "RingHom") -> "Ideal":
        return hom.comap(self)

    def map(self, hom: "RingHom") -> "Ideal":
        return hom.map_ideal(self)

    def __str__(self) -> str:
        gens = [str(g) for g in self.generators()]
        return f"({', '.join(gens) if gens else '0'})"


@dataclass(frozen=True)
class RingHom:
    """A ring homomorphism given by an integer matrix between cover lattices.

    Row ``i`` of `matrix` is the image of the ``i``-th cover basis vector of the
    source. Denominators are carried over unchanged, so a localized source
    requires a target localized at the same prime.
    """

    source: CommRing
    target: CommRing
    matrix: lat.Basis

    def __post_init__(self) -> None:
        m, n = self.source.rank, self.target.rank
        matrix = tuple(tuple(int(c) for c in row) for row in self.matrix)
        if len(matrix) != m or any(len(row) != n for row in matrix):
            raise ContractViolation(f"a map {self.source} -> {self.target} needs a {m}x{n} matrix")
        object.__setattr__(self, "matrix", matrix)

        if isinstance(self.source, LocalizedRing):
            p = self.source.residue_characteristic
            inverts = isinstance(self.target, LocalizedRing) and self.target.residue_characteristic in (0, p)
            if not inverts:
                raise ContractViolation("denominators of the source must stay invertible in the target")

        one = lat.apply(self.source._unit_vector(0), matrix)
        diff = tuple(a - b for a, b in zip(one, self.target._unit_vector(0)))
        if not lat.contains(self.target.relations, diff):
            raise ContractViolation("a ring map must send 1 to 1")
        for row in self.source.relations:
            if not lat.contains(self.target.relations, lat.apply(row, matrix)):
                raise ContractViolation(f"map {self.source} -> {self.target} is not well defined")

    @classmethod
    def structure_map(cls, target: CommRing, base: Optional[CommRing] = None) -> "RingHom":
        """The unique map from a quotient of the integers into `target`."""
        if base is None:
            base = MonogenicRing.integers()
        if base.rank != 1:
            raise ContractViolation(f"structure maps start at a quotient of the integers, not {base}")
        return cls(base, target, (target._unit_vector(0),))

    def __call__(self, a: Any) -> RingElement:
        a = self.source(a)
        return self.target.element(lat.apply(a.vector, self.matrix), a.denominator)

    def comap(self, ideal: Ideal) -> Ideal:
        """Preimage of an ideal of the target."""
        if ideal.ring != self.target:
            raise RingMismatchError(f"{ideal} is not an ideal of {self.target}")
        pre = lat.preimage(self.matrix, ideal.lattice, self.source.rank)
        pre = lat.lattice_sum(pre, self.source.relations, self.source.rank)
        return Ideal(self.source, self.source._saturate(pre))

    def map_ideal(self, ideal: Ideal) -> Ideal:
        """Ideal of the target generated by the image of `ideal`."""
        if ideal.ring != self.source:
            raise RingMismatchError(f"{ideal} is not an ideal of {self.source}")
        images = [lat.apply(v, self.matrix) for v in ideal.lattice]
        return Ideal(self.target, self.target._ideal_lattice(images))

    def kernel(self) -> Ideal:
        return self.comap(self.target.zero_ideal)

    def is_injective(self) -> bool:
        return self.kernel().is_bot()

    def quotient(self, ideal: Ideal) -> "RingHom":
        """Induced map ``source/comap(ideal) -> target/ideal``."""
        lower = self.comap(ideal)
        return RingHom(self.source.quotient(lower), self.target.quotient(ideal), self.matrix)

    def localize(self, characteristic: int) -> "RingHom":
        """Induced map ``source_(p) -> target_(p)``.

        Already localized rings are localized further (see
        `LocalizedRing.localize`), so the map stays well defined.
        """
        return RingHom(self.source.localize(characteristic), self.target.localize(characteristic), self.matrix)

    def compose(self, first: "RingHom") -> "RingHom":
        """``self o first``."""
        if first.target != self.source:
            raise RingMismatchError("maps cannot be composed: target and source differ")
        matrix = tuple(lat.apply(row, self.matrix) for row in first.matrix)
        return RingHom(first.source, self.target, matrix)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"
