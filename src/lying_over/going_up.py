"""Going up: extend a prime of ``S`` to a prime over a larger prime of ``R``."""

from __future__ import annotations

import logging

from .certificates import PrimeIdeal
from .errors import ContractViolation, RingMismatchError
from .integrality import IntegralExtension
from .lifting import lift_prime
from .strategies import Strategy, choose_first

logger = logging.getLogger(__name__)


def going_up(
    integral: IntegralExtension,
    prime: PrimeIdeal,
    lower: PrimeIdeal,
    *,
    strategy: Strategy = choose_first,
    verify: bool = True,
) -> PrimeIdeal:
    """Return a prime ``Q >= lower`` of ``S`` with ``comap(Q) == prime``.

    Requires ``comap(lower) <= prime``. Works in ``S/lower``, which is integral
    over ``R/comap(lower)``, and pulls the lifted prime back to ``S``.
    """
    f = integral.algebra_map
    if prime.ring != f.source or lower.ring != f.target:
        raise RingMismatchError(f"expected a prime of {f.source} and a prime of {f.target}")
    below = f.comap(lower.ideal)
    if not below <= prime.ideal:
        raise ContractViolation(f"comap {below} of {lower} is not contained in {prime}")

    bar = integral.quotient(lower.ideal)
    to_base = f.source.quotient_map(below)
    prime_bar = PrimeIdeal.certify(to_base.map_ideal(prime.ideal))
    logger.debug("going up from %s over %s in %s", lower, prime_bar, bar)

    lifted = lift_prime(bar, prime_bar, strategy=strategy, verify=verify)
    result = PrimeIdeal.certify(f.target.quotient_map(lower.ideal).comap(lifted.ideal))
    if not lower.ideal <= result.ideal:
        raise RuntimeError(f"{result} does not contain {lower}")
    if result.ideal.comap(f) != prime.ideal:
        raise RuntimeError(f"{result} does not lie over {prime}")
    return result
