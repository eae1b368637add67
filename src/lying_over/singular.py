"""Interoperability helpers for the computer algebra system **Singular**.

This package keeps all core computations in Python/SymPy, but ideals of the
rings handled here are ideals of ``ZZ[x]`` in disguise, and it is often handy
to cross-check them (standard bases over the integers, primary decomposition)
in Singular.

This module provides:

- a small `SingularIdeal` data structure,
- conversion of an `Ideal` of a `MonogenicRing` or `LocalizedRing` into the
  ideal of ``ZZ[x]`` it corresponds to, and
- optional execution of Singular via subprocess (if installed).

Nothing in this module requires Singular at *import time*; only the
`SingularIdeal.run()` method assumes a `Singular` executable is available.

Notes
-----
- The ring variable is exported unchanged when Singular accepts it as an
  identifier and renamed to ``x_<name>`` otherwise.
- Ideals of a localized ring are exported through their contraction to the
  unlocalized ring, which determines them.
"""

from __future__ import annotations

import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Tuple

import sympy as sp

from .rings import Ideal, RingElement


_IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9_]*\Z")


def _singular_identifier(name: str) -> str:
    """`name` if Singular accepts it as a ring variable, else a cleaned ``x_`` name."""
    if _IDENTIFIER_RE.match(name):
        return name
    cleaned = re.sub(r"\W", "", name)
    return f"x_{cleaned}" if cleaned else "x"


def sympy_to_singular(expr: sp.Expr, variable: sp.Symbol, name: str) -> str:
    """Convert a polynomial in `variable` to Singular syntax, renaming it to `name`."""
    s = sp.sstr(sp.expand(expr).xreplace({variable: sp.Symbol(name)}))
    # Singular uses '^' for exponentiation.
    return s.replace("**", "^").replace(" ", "")


@dataclass(frozen=True)
class SingularIdeal:
    """An ideal of ``ZZ[variable]`` intended for export to Singular."""

    generators: Tuple[sp.Expr, ...]
    variable: sp.Symbol
    monomial_order: str = "dp"  # 'dp' = degree reverse lexicographic (global order)

    @classmethod
    def from_ideal(cls, ideal: Ideal, *, monomial_order: str = "dp") -> "SingularIdeal":
        """The ideal of ``ZZ[x]`` whose image in the ring is `ideal`.

        Its generators are the defining polynomial followed by the lattice
        basis of `ideal` (which already contains the ring's relations).
        """
        ring = ideal.ring
        x = ring.symbol
        modulus = sum((c * x ** i for i, c in enumerate(ring.modulus)), sp.Integer(0))
        gens = [modulus] + [RingElement(ring, row).to_sympy() for row in ideal.lattice]
        return cls(tuple(gens), x, str(monomial_order))

    @property
    def singular_name(self) -> str:
        return _singular_identifier(str(self.variable))

    def to_singular_script(
        self,
        *,
        ring_name: str = "R",
        ideal_name: str = "I",
        compute_std: bool = False,
        primary_decomposition: bool = False,
        comment: Optional[str] = None,
    ) -> str:
        """Render a Singular script defining the ring and ideal.

        Parameters
        ----------
        compute_std:
            If True, append commands computing and printing a standard basis
            over the integers.
        primary_decomposition:
            If True, append commands loading `primdecint.lib` and calling
            `primdecZ`. (This can be expensive; primarily intended as a
            starting point.)
        comment:
            Optional comment header (will be prefixed with `// ` on each line).
        """
        name = self.singular_name
        gens_sing = [sympy_to_singular(g, self.variable, name) for g in self.generators]

        lines: List[str] = []
        if comment:
            for ln in str(comment).splitlines():
                lines.append(f"// {ln}")
        lines.append(f"ring {ring_name} = integer,({name}),{self.monomial_order};")
        lines.append(f"ideal {ideal_name} = {','.join(gens_sing)};")
        lines.append("")  # spacer

        if compute_std:
            lines.append(f"ideal {ideal_name}_std = std({ideal_name});")
            lines.append(f"print({ideal_name}_std);")
            lines.append("")

        if primary_decomposition:
            lines.append('LIB "primdecint.lib";')
            lines.append(f"list {ideal_name}_pd = primdecZ({ideal_name});")
            lines.append(f"print({ideal_name}_pd);")
            lines.append("")

        return "\n".join(lines)

    def run(self, script: Optional[str] = None, *, executable: str = "Singular", timeout: int = 60) -> str:
        """Feed `script` (by default the standard basis script) to Singular.

        Returns what Singular printed; anything it wrote to stderr is appended
        after a ``// stderr`` marker.
        """
        path = shutil.which(executable)
        if path is None:
            raise RuntimeError(f"{executable} was not found on PATH")
        if script is None:
            script = self.to_singular_script(compute_std=True)

        proc = subprocess.run(
            [path, "-q"],
            input=script + "\nquit;\n",
            capture_output=True,
            text=True,
            timeout=timeout,
        )
        if proc.returncode:
            raise RuntimeError(f"{executable} failed with exit code {proc.returncode}: {proc.stderr.strip()}")
        if proc.stderr.strip():
            return f"{proc.stdout}\n// stderr\n{proc.stderr}"
        return proc.stdout
