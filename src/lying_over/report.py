"""Human-readable reporting utilities.

This module provides lightweight helpers to produce readable console / Markdown
reports from the Python API:

- an ideal with its generators, contraction and primality,
- the primes lying over a given prime,
- the result of a going-up step.

Nothing here is required for the core algebra; it is strictly presentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

import sympy as sp

from .certificates import PrimeIdeal
from .integrality import IntegralExtension
from .rings import Ideal


def _expr_to_str(e: sp.Expr) -> str:
    """Stable string for SymPy expressions in reports."""
    return sp.sstr(e)


def _as_ideal(ideal: Union[Ideal, PrimeIdeal]) -> Ideal:
    return ideal.ideal if isinstance(ideal, PrimeIdeal) else ideal


@dataclass
class ReportOptions:
    """Tunable knobs for report verbosity."""

    max_generators: int = 8
    include_lattice: bool = False
    include_properties: bool = True
    bullet: str = "-"


def format_generators(ideal: Ideal, *, max_items: int = 8) -> List[str]:
    """Generators of `ideal` as strings; zero ideals give ``["0"]``."""
    gens = [_expr_to_str(g.to_sympy()) for g in ideal.generators()]
    if not gens:
        return ["0"]
    out = gens[: int(max_items)]
    if len(gens) > max_items:
        out.append(f"... ({len(gens) - max_items} more)")
    return out


def format_ideal(ideal: Union[Ideal, PrimeIdeal], *, options: Optional[ReportOptions] = None) -> str:
    """One-block description of an ideal."""
    opt = options or ReportOptions()
    ideal = _as_ideal(ideal)
    lines = [f"({', '.join(format_generators(ideal, max_items=opt.max_generators))}) in {ideal.ring}"]
    if opt.include_properties:
        lines.append(f"  {opt.bullet} contraction: {ideal.contraction()}ZZ")
        lines.append(f"  {opt.bullet} prime: {ideal.is_prime()}, maximal: {ideal.is_maximal()}")
    if opt.include_lattice:
        lines.append(f"  {opt.bullet} lattice: {list(ideal.lattice)}")
    return "\n".join(lines)


def format_lying_over(
    integral: IntegralExtension,
    prime: Union[Ideal, PrimeIdeal],
    lifted: Iterable[PrimeIdeal],
    *,
    options: Optional[ReportOptions] = None,
) -> str:
    """Report the primes of the target found above `prime`."""
    opt = options or ReportOptions(include_properties=False)
    prime = _as_ideal(prime)
    lifted = list(lifted)

    lines = [f"### Lying over {prime} in {integral.source}"]
    lines.append(f"Extension: {integral}")
    lines.append(f"Primes above ({len(lifted)}):")
    for Q in lifted:
        block = format_ideal(Q, options=opt)
        lines.extend(f"  {opt.bullet} {ln}" if i == 0 else f"    {ln}" for i, ln in enumerate(block.splitlines()))
    return "\n".join(lines) + "\n"


def format_going_up(
    integral: IntegralExtension,
    prime: Union[Ideal, PrimeIdeal],
    lower: Union[Ideal, PrimeIdeal],
    result: PrimeIdeal,
    *,
    options: Optional[ReportOptions] = None,
) -> str:
    """Report a going-up step ``lower <= result`` over ``prime``."""
    opt = options or ReportOptions(include_properties=False)
    prime, lower = _as_ideal(prime), _as_ideal(lower)
    below = integral.algebra_map.comap(lower)

    lines = [f"### Going up in {integral.target}"]
    lines.append(f"{opt.bullet} start: {lower} over {below}")
    lines.append(f"{opt.bullet} target prime: {prime}")
    lines.append(f"{opt.bullet} result: {result}")
    if opt.include_properties:
        lines.append(f"{opt.bullet} result is maximal: {result.ideal.is_maximal()}")
    return "\n".join(lines) + "\n"
