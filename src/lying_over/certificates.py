"""Prime-ideal certificates.

A `PrimeIdeal` can only be obtained from `PrimeIdeal.certify`, which decides
primality exactly, or from the lifting constructions, which certify their
result before returning it. Functions that need a prime therefore take a
`PrimeIdeal` and never re-check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import NotPrimeError
from .rings import CommRing, Ideal, RingHom

_TOKEN = object()


@dataclass(frozen=True)
class PrimeIdeal:
    ideal: Ideal
    _token: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _TOKEN:
            raise TypeError("PrimeIdeal values are created with PrimeIdeal.certify(ideal)")

    @classmethod
    def certify(cls, ideal: Ideal) -> "PrimeIdeal":
        if not ideal.is_prime():
            raise NotPrimeError(f"{ideal} is not a prime ideal of {ideal.ring}")
        return cls(ideal, _TOKEN)

    @property
    def ring(self) -> CommRing:
        return self.ideal.ring

    def __contains__(self, item: Any) -> bool:
        return item in self.ideal

    def comap(self, hom: RingHom) -> "PrimeIdeal":
        """Preimage under a ring map; the preimage of a prime is prime."""
        return PrimeIdeal.certify(hom.comap(self.ideal))

    def __str__(self) -> str:
        return str(self.ideal)
