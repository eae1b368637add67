"""Exception types.

Every failure in this package is a violated precondition: a zero polynomial
handed to the witness finder, a non-prime ideal where a prime is required,
values from two different rings combined, and so on. These are raised as
`ValueError` subclasses so callers that already guard against bad input keep
working. Post-conditions of the constructions that fail (which cannot happen
for valid input) surface as `RuntimeError`.
"""

from __future__ import annotations


class ContractViolation(ValueError):
    """A caller-enforced precondition does not hold."""


class RingMismatchError(ContractViolation):
    """Elements, ideals or maps of different rings were combined."""


class NotPrimeError(ContractViolation):
    """An ideal was certified as prime but is not."""


class NotIntegralError(ContractViolation):
    """A ring map was certified as integral but is not."""


class NoWitnessError(ContractViolation):
    """The coefficient-witness search ran out of coefficients (zero polynomial)."""
