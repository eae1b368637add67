from __future__ import annotations

from typing import Callable, Dict, List

from .rings import MonogenicRing


def integers() -> MonogenicRing:
    """The integers ZZ, presented as ZZ[x]/(x)."""
    return MonogenicRing.integers()


def integers_mod(c: int) -> MonogenicRing:
    """ZZ/(c)."""
    Z = MonogenicRing.integers()
    return Z.quotient(Z.ideal(int(c)))


def gaussian_integers() -> MonogenicRing:
    """ZZ[i] = ZZ[x]/(x**2 + 1).

    Primes split according to p mod 4:
        2 ramifies, p = 1 mod 4 splits into two primes, p = 3 mod 4 stays prime.
    """
    return MonogenicRing((1, 0, 1), variable="i")


def sqrt2_integers() -> MonogenicRing:
    """ZZ[sqrt 2] = ZZ[x]/(x**2 - 2).

    7 splits as (7, x - 3)(7, x + 3); 5 is inert; 2 ramifies.
    """
    return MonogenicRing((-2, 0, 1))


def cube_root2_integers() -> MonogenicRing:
    """ZZ[2**(1/3)] = ZZ[x]/(x**3 - 2).

    5 factors as (5, x - 3)(5, x**2 + 3*x - 1), a degree-one and a degree-two prime.
    """
    return MonogenicRing((-2, 0, 0, 1))


def dual_numbers() -> MonogenicRing:
    """ZZ[e]/(e**2): not reduced, so every prime contains e."""
    return MonogenicRing((0, 0, 1), variable="e")


_BUILTIN: Dict[str, Callable[[], MonogenicRing]] = {
    "integers": integers,
    "gaussian_integers": gaussian_integers,
    "sqrt2_integers": sqrt2_integers,
    "cube_root2_integers": cube_root2_integers,
    "dual_numbers": dual_numbers,
}


def list_available_rings() -> List[str]:
    """Names of the built-in rings that take no parameters."""
    return sorted(_BUILTIN)


def get_ring(name: str) -> MonogenicRing:
    try:
        return _BUILTIN[name]()
    except KeyError:
        raise ValueError(f"Unknown ring '{name}'. Available: {', '.join(list_available_rings())}") from None
