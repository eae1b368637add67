from __future__ import annotations

import re
from typing import List, Union

from .errors import ContractViolation
from .rings import CommRing, Ideal, LocalizedRing, MonogenicRing


# "ZZ", "ZZ/(6)" or "ZZ/6".
_INTEGERS_RE = re.compile(r"^\s*ZZ\s*(?:/\s*\(?\s*(-?\d+)\s*\)?)?\s*$")

# "ZZ[x]/(x**2 - 2)" or "ZZ[t]/(t^2 + 1, 5)".
_ADJOIN_RE = re.compile(r"^\s*ZZ\s*\[\s*([A-Za-z_][A-Za-z0-9_]*)\s*\]\s*/\s*\((.*)\)\s*$")

# "(ZZ[x]/(x**2 - 2))_(5)": localization at the integers outside 5Z.
_LOCAL_RE = re.compile(r"^\s*\((.*)\)\s*_\s*\(?\s*(\d+)\s*\)?\s*$")


def _split_top_level(text: str) -> List[str]:
    """Split on commas that are not nested inside parentheses or brackets.

    '(x+1, 2), 3' -> ['(x+1, 2)', '3']
    """
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for ch in text:
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
            if depth < 0:
                raise ContractViolation(f"Unbalanced brackets in '{text}'")
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    if depth != 0:
        raise ContractViolation(f"Unbalanced brackets in '{text}'")
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return [p for p in parts if p]


def _strip_outer_parens(s: str) -> str:
    """'(5, x)' -> '5, x', but '(x+1)*(x-1)' is left alone."""
    if not (s.startswith("(") and s.endswith(")")):
        return s
    depth = 0
    for i, ch in enumerate(s):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0 and i != len(s) - 1:
                return s
    return s[1:-1]


def parse_ring(text: str) -> Union[MonogenicRing, LocalizedRing]:
    """Parse a ring description.

    Supported forms
    ---------------
    - ``ZZ`` and ``ZZ/(c)``
    - ``ZZ[x]/(f, g1, ..., gk)``: ``f`` monic defines the order, the ``gi``
      are extra relations
    - ``(R)_(p)``: localization of such a ring at the integers outside ``pZ``

    Powers may be written with ``^`` or ``**``.
    """
    m = _LOCAL_RE.match(text)
    if m:
        base = parse_ring(m.group(1))
        if not isinstance(base, MonogenicRing):
            raise ContractViolation(f"Cannot localize twice: '{text}'")
        return base.localize(int(m.group(2)))

    m = _INTEGERS_RE.match(text)
    if m:
        Z = MonogenicRing.integers()
        if m.group(1) is None:
            return Z
        return Z.quotient(Z.ideal(int(m.group(1))))

    m = _ADJOIN_RE.match(text)
    if m:
        variable, body = m.group(1), m.group(2)
        parts = _split_top_level(body)
        if not parts:
            raise ContractViolation(f"Missing defining polynomial in '{text}'")
        ring = MonogenicRing.adjoin_root(parts[0], variable)
        if len(parts) == 1:
            return ring
        return ring.quotient(ring.ideal(*parts[1:]))

    raise ContractViolation(f"Could not parse ring description: '{text}'")


def parse_ideal(ring: CommRing, text: str) -> Ideal:
    """Parse ``"(g1, ..., gk)"`` (parentheses optional) into an ideal of `ring`."""
    s = _strip_outer_parens(text.strip())
    parts = _split_top_level(s)
    if not parts:
        return ring.zero_ideal
    return ring.ideal(*parts)
