"""Lying over in ZZ[sqrt 2] (split, inert and ramified primes).

For each rational prime p this script

  1) certifies (p) as a prime of ZZ,
  2) lifts it to every prime of ZZ[sqrt 2] obtainable by localization,
  3) prints the primes with their contractions, and
  4) shows that the choice of maximal ideal is a parameter of `lift_prime`.

Run from the repository root:

    python examples/example_lying_over_sqrt2.py
"""

from lying_over import (
    IntegralExtension,
    PrimeIdeal,
    RandomChoice,
    format_lying_over,
    integers,
    lift_prime,
    lying_over_primes,
    sqrt2_integers,
)


def main() -> None:
    Z = integers()
    S = sqrt2_integers()
    integral = IntegralExtension.of(S)

    for p in (2, 5, 7, 0):
        P = PrimeIdeal.certify(Z.ideal(p))
        print(format_lying_over(integral, P, lying_over_primes(integral, P)))

    P = PrimeIdeal.certify(Z.ideal(7))
    print("Random choices above (7):")
    for seed in range(3):
        Q = lift_prime(integral, P, strategy=RandomChoice(seed))
        print(f"  seed={seed}: {Q}")


if __name__ == "__main__":
    main()
