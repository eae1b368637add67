"""Top-level package API for lying_over.

This package implements the constructive side of the lying-over and going-up
theorems for integral ring extensions ``R -> S``, where ``S`` is a finite
extension of (a quotient or localization of) the integers such as ``ZZ[sqrt 2]``
or ``ZZ[x]/(x**2 - x)``:

- coefficient witnesses: a nonzero coefficient of a polynomial with a root in
  an ideal ``I`` lies in ``comap(I)``,
- order witnesses for comaps, and maximality transfer,
- ``lift_prime``: a prime of ``S`` over a given prime of ``R``,
- ``going_up``: the same, above a given prime of ``S``.

Public API:
- MonogenicRing, LocalizedRing, Ideal, RingHom, Polynomial
- PrimeIdeal, IntegralExtension
- find_witness, lift_prime, going_up, minimal_polynomial, ...
- Built-in example rings, parsers, reports and Singular export
"""

from .errors import (
    ContractViolation,
    NoWitnessError,
    NotIntegralError,
    NotPrimeError,
    RingMismatchError,
)
from .rings import CommRing, Ideal, LocalizedRing, MonogenicRing, RingElement, RingHom
from .certificates import PrimeIdeal
from .polynomial import Polynomial
from .integrality import IntegralExtension, LocalizedExtension
from .witness import CoefficientWitness, find_difference_witness, find_witness, find_witness_in_domain
from .order import (
    ComapWitness,
    StrictInclusion,
    comap_nonzero,
    comap_nonzero_of_integral,
    comap_strict_mono,
    comap_strict_mono_of_integral,
    maximal_comap_of_maximal,
    maximal_of_maximal_comap,
    nonzero_comap_of_nonzero_ideal,
)
from .strategies import RandomChoice, Strategy, choose_by, choose_first, choose_last
from .lifting import lift_prime, lying_over_primes
from .going_up import going_up
from .minpoly import minimal_polynomial
from .parser import parse_ideal, parse_ring
from .singular import SingularIdeal
from .report import ReportOptions, format_going_up, format_ideal, format_lying_over
from .validation import spot_check_prime
from .examples import (
    cube_root2_integers,
    dual_numbers,
    gaussian_integers,
    get_ring,
    integers,
    integers_mod,
    list_available_rings,
    sqrt2_integers,
)

__version__ = "0.1.0"

__all__ = [
    "ContractViolation",
    "RingMismatchError",
    "NotPrimeError",
    "NotIntegralError",
    "NoWitnessError",
    "CommRing",
    "RingElement",
    "MonogenicRing",
    "LocalizedRing",
    "Ideal",
    "RingHom",
    "PrimeIdeal",
    "Polynomial",
    "IntegralExtension",
    "LocalizedExtension",
    "CoefficientWitness",
    "find_witness",
    "find_witness_in_domain",
    "find_difference_witness",
    "ComapWitness",
    "StrictInclusion",
    "comap_nonzero",
    "comap_strict_mono",
    "comap_nonzero_of_integral",
    "comap_strict_mono_of_integral",
    "nonzero_comap_of_nonzero_ideal",
    "maximal_comap_of_maximal",
    "maximal_of_maximal_comap",
    "Strategy",
    "choose_first",
    "choose_last",
    "choose_by",
    "RandomChoice",
    "lift_prime",
    "lying_over_primes",
    "going_up",
    "minimal_polynomial",
    "parse_ring",
    "parse_ideal",
    "SingularIdeal",
    "ReportOptions",
    "format_ideal",
    "format_lying_over",
    "format_going_up",
    "spot_check_prime",
    "integers",
    "integers_mod",
    "gaussian_integers",
    "sqrt2_integers",
    "cube_root2_integers",
    "dual_numbers",
    "list_available_rings",
    "get_ring",
]
