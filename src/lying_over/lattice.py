"""Exact arithmetic on integer lattices.

Every ring handled by this package is a finitely generated module over (a
quotient of) the integers, presented over a *cover* lattice ``Z^n``. Ideals
are sublattices of that cover, so all ideal operations reduce to the handful
of lattice operations below:

- `hnf`: canonical (row) Hermite normal form of the lattice spanned by vectors,
- `reduce_vector` / `contains`: canonical coset representatives and membership,
- `preimage` / `intersection`: computed from the integer left kernel of a
  stacked matrix,
- `saturate` / `saturate_outside`: saturation with respect to all nonzero
  integers, or to the integers outside ``pZ``.

Lattices are tuples of row vectors in Hermite normal form: pivots strictly
increase, pivots are positive and the entries above a pivot lie in
``[0, pivot)``. Two lattices are equal iff their HNF tuples are equal.

SymPy does not expose the unimodular transformation of its Hermite normal form,
so the echelon reduction is done here with extended-gcd row operations.
"""

from __future__ import annotations

from functools import reduce
from math import gcd
from typing import List, Sequence, Tuple

import sympy as sp


Vector = Tuple[int, ...]
Basis = Tuple[Vector, ...]


def _xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, s, t) with s*a + t*b = g = gcd(a, b) >= 0."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    if old_r < 0:
        old_r, old_s, old_t = -old_r, -old_s, -old_t
    return old_r, old_s, old_t


def _combine(a: int, u: Sequence[int], b: int, v: Sequence[int]) -> List[int]:
    return [a * x + b * y for x, y in zip(u, v)]


def _lcm(values: Sequence[int]) -> int:
    return reduce(lambda a, b: a * b // gcd(a, b), values, 1)


def _echelon(rows: Sequence[Sequence[int]], ncols: int) -> Tuple[List[List[int]], List[List[int]], List[int]]:
    """Row-reduce an integer matrix to Hermite normal form.

    Returns
    -------
    (H, U, pivots)
        ``U`` is unimodular with ``U * rows = H``. The first ``len(pivots)``
        rows of ``H`` are the HNF basis; the remaining rows of ``H`` are zero,
        so the matching rows of ``U`` form a basis of the integer left kernel.
    """
    A = [[int(v) for v in row] for row in rows]
    m = len(A)
    U = [[int(i == j) for j in range(m)] for i in range(m)]
    pivots: List[int] = []
    top = 0

    for col in range(ncols):
        if top >= m:
            break
        for i in range(top + 1, m):
            b = A[i][col]
            if b == 0:
                continue
            a = A[top][col]
            g, s, t = _xgcd(a, b)
            # [[s, t], [-b/g, a/g]] has determinant 1.
            u, v = -b // g, a // g
            A[top], A[i] = _combine(s, A[top], t, A[i]), _combine(u, A[top], v, A[i])
            U[top], U[i] = _combine(s, U[top], t, U[i]), _combine(u, U[top], v, U[i])

        piv = A[top][col]
        if piv == 0:
            continue
        if piv < 0:
            A[top] = [-c for c in A[top]]
            U[top] = [-c for c in U[top]]
            piv = -piv

        for i in range(top):
            q = A[i][col] // piv
            if q:
                A[i] = _combine(1, A[i], -q, A[top])
                U[i] = _combine(1, U[i], -q, U[top])

        pivots.append(col)
        top += 1

    return A, U, pivots


def _pivot(row: Sequence[int]) -> int:
    for j, c in enumerate(row):
        if c != 0:
            return j
    raise ValueError("zero row has no pivot")


def identity(dim: int) -> Basis:
    return tuple(tuple(int(i == j) for j in range(dim)) for i in range(dim))


def scalar_matrix(k: int, dim: int) -> Basis:
    return tuple(tuple(int(k) if i == j else 0 for j in range(dim)) for i in range(dim))


def hnf(vectors: Sequence[Sequence[int]], dim: int) -> Basis:
    """HNF basis of the lattice spanned by `vectors` inside ``Z^dim``."""
    vectors = [list(v) for v in vectors]
    if any(len(v) != dim for v in vectors):
        raise ValueError(f"all vectors must have length {dim}")
    if not vectors:
        return ()
    H, _, pivots = _echelon(vectors, dim)
    return tuple(tuple(H[i]) for i in range(len(pivots)))


def reduce_vector(basis: Basis, v: Sequence[int]) -> Tuple[Vector, Tuple[int, ...]]:
    """Reduce `v` modulo the lattice.

    Returns the canonical coset representative and the coordinates ``q`` with
    ``v = sum(q_i * basis_i) + remainder``.
    """
    rem = [int(c) for c in v]
    coords: List[int] = []
    for row in basis:
        col = _pivot(row)
        q = rem[col] // row[col]
        if q:
            rem = [x - q * y for x, y in zip(rem, row)]
        coords.append(q)
    return tuple(rem), tuple(coords)


def contains(basis: Basis, v: Sequence[int]) -> bool:
    rem, _ = reduce_vector(basis, v)
    return not any(rem)


def is_sublattice(sub: Basis, sup: Basis) -> bool:
    return all(contains(sup, v) for v in sub)


def lattice_sum(a: Basis, b: Basis, dim: int) -> Basis:
    return hnf(list(a) + list(b), dim)


def apply(v: Sequence[int], matrix: Sequence[Sequence[int]]) -> Vector:
    """Row vector times matrix."""
    if len(v) != len(matrix):
        raise ValueError("vector length must match the number of matrix rows")
    if not matrix:
        return ()
    out = [0] * len(matrix[0])
    for c, row in zip(v, matrix):
        if c:
            out = [x + c * y for x, y in zip(out, row)]
    return tuple(out)


def image(basis: Basis, matrix: Sequence[Sequence[int]], dim: int) -> Basis:
    return hnf([apply(v, matrix) for v in basis], dim)


def left_kernel(rows: Sequence[Sequence[int]], ncols: int) -> List[Vector]:
    """Basis of ``{w : sum(w_i * rows_i) = 0}`` over the integers."""
    if not rows:
        return []
    _, U, pivots = _echelon(rows, ncols)
    return [tuple(U[i]) for i in range(len(pivots), len(rows))]


def preimage(matrix: Sequence[Sequence[int]], basis: Basis, dim_source: int) -> Basis:
    """Lattice ``{v in Z^dim_source : v * matrix in basis}``.

    The kernel of `matrix` is always contained in the result.
    """
    if len(matrix) != dim_source:
        raise ValueError("matrix must have one row per source coordinate")
    if dim_source == 0:
        return ()
    ncols = len(matrix[0])
    rows = [list(r) for r in matrix] + [list(b) for b in basis]
    kernel = left_kernel(rows, ncols)
    return hnf([w[:dim_source] for w in kernel], dim_source)


def intersection(a: Basis, b: Basis, dim: int) -> Basis:
    if not a or not b:
        return ()
    coords = preimage(a, b, len(a))
    return image(coords, a, dim)


def saturate(basis: Basis, dim: int) -> Basis:
    """Saturation ``(L tensor Q) cap Z^dim`` of a lattice."""
    if not basis:
        return ()
    null = sp.Matrix([list(row) for row in basis]).nullspace()
    if not null:
        return identity(dim)

    columns: List[List[int]] = []
    for vec in null:
        entries = [sp.Rational(e) for e in vec]
        den = _lcm([int(e.q) for e in entries])
        columns.append([int(e * den) for e in entries])

    # v lies in the rational span of `basis` iff it is orthogonal to every
    # column of the rational right kernel.
    rows = [[col[i] for col in columns] for i in range(dim)]
    return hnf(left_kernel(rows, len(columns)), dim)


def index(sub: Basis, sup: Basis) -> int:
    """Index ``[sup : sub]`` of two HNF lattices of the same rank."""
    if len(sub) != len(sup):
        raise ValueError("index is only defined for lattices of equal rank")
    if not sub:
        return 1
    coords = []
    for v in sub:
        rem, q = reduce_vector(sup, v)
        if any(rem):
            raise ValueError("first lattice is not contained in the second")
        coords.append(list(q))
    return abs(int(sp.Matrix(coords).det()))


def saturate_outside(basis: Basis, dim: int, characteristic: int) -> Basis:
    """Saturation with respect to the integers outside ``characteristic * Z``.

    ``characteristic = 0`` saturates with respect to every nonzero integer.
    """
    full = saturate(basis, dim)
    if characteristic == 0:
        return full
    m = index(basis, full)
    while m % characteristic == 0:
        m //= characteristic
    if m == 1:
        return basis
    return preimage(scalar_matrix(m, dim), basis, dim)
