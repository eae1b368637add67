#!/usr/bin/env python3
"""
Basic Usage Examples for the lying_over package

This script demonstrates the core features of the package with simple,
self-contained examples.
"""

import sys
sys.path.insert(0, 'src')
from lying_over import (
    IntegralExtension, MonogenicRing, Polynomial, PrimeIdeal, RingHom,
    find_witness, going_up, lift_prime, lying_over_primes, minimal_polynomial,
    choose_first, choose_last, format_ideal, parse_ideal, parse_ring,
    integers, list_available_rings, get_ring,
)


def example_1_rings_from_strings():
    """Demonstrate the ring and ideal parsers."""
    print("\n" + "=" * 50)
    print("Example 1: Rings and Ideals from Strings")
    print("=" * 50)

    S = parse_ring("ZZ[x]/(x^2 - 2)")
    print(f"\nRing: {S}")
    x = S.gen
    print(f"  (1 + x)^2 = {(1 + x) ** 2}")
    print(f"  (x - 3)(x + 3) = {(x - 3) * (x + 3)}")

    P = parse_ideal(S, "(7, x - 3)")
    print("\n" + format_ideal(P))

    R = parse_ring("ZZ/(12)")
    print(f"\nRing: {R}; 7 * 7 = {R(7) * R(7)}")


def example_2_built_in_rings():
    """Demonstrate built-in ring factory functions."""
    print("\n" + "=" * 50)
    print("Example 2: Built-in Rings")
    print("=" * 50)

    for name in list_available_rings():
        ring = get_ring(name)
        print(f"  {name}(): {ring}")


def example_3_coefficient_witness():
    """A root in an ideal forces a coefficient into the comap."""
    print("\n" + "=" * 50)
    print("Example 3: Coefficient Witness")
    print("=" * 50)

    Z = integers()
    f = RingHom.structure_map(Z)
    p = Polynomial.from_ints(Z, (0, -4, 1))
    w = find_witness(f, 4, Z.ideal(4), p)
    print(f"\n  p = {p}, r = 4, I = (4)")
    print(f"  coefficient of X^{w.index}: {w.coefficient}")


def example_4_lying_over():
    """Lift primes of ZZ to ZZ[sqrt 2]."""
    print("\n" + "=" * 50)
    print("Example 4: Lying Over")
    print("=" * 50)

    Z = integers()
    S = parse_ring("ZZ[x]/(x^2 - 2)")
    integral = IntegralExtension.of(S)

    for p in (2, 5, 7):
        P = PrimeIdeal.certify(Z.ideal(p))
        primes = lying_over_primes(integral, P)
        print(f"\n  over ({p}): {', '.join(str(Q) for Q in primes)}")

    P = PrimeIdeal.certify(Z.ideal(7))
    print(f"\n  choose_first: {lift_prime(integral, P, strategy=choose_first)}")
    print(f"  choose_last:  {lift_prime(integral, P, strategy=choose_last)}")


def example_5_going_up_and_minimal_polynomials():
    """Going up from (x) in ZZ[x]/(x^2 - x), and minimal polynomials."""
    print("\n" + "=" * 50)
    print("Example 5: Going Up and Minimal Polynomials")
    print("=" * 50)

    Z = integers()
    S = MonogenicRing.adjoin_root("x**2 - x")
    integral = IntegralExtension.of(S)
    Q = going_up(integral, PrimeIdeal.certify(Z.ideal(5)), PrimeIdeal.certify(S.ideal("x")))
    print(f"\n  (x) <= {Q} over (5)")

    for s in ("x", "x + 2", "3"):
        print(f"  minimal polynomial of {s}: {minimal_polynomial(integral, s)}")


if __name__ == "__main__":
    example_1_rings_from_strings()
    example_2_built_in_rings()
    example_3_coefficient_witness()
    example_4_lying_over()
    example_5_going_up_and_minimal_polynomials()
