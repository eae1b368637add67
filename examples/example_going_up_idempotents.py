"""Going up in ZZ[x]/(x**2 - x), a ring with two minimal primes.

ZZ[x]/(x**2 - x) is ZZ x ZZ in disguise: (x) and (x - 1) are the primes over 0.
Starting from either one, going up over (5) must stay on the same component.

Run from the repository root:

    python examples/example_going_up_idempotents.py
"""

from lying_over import (
    IntegralExtension,
    MonogenicRing,
    PrimeIdeal,
    ReportOptions,
    comap_strict_mono_of_integral,
    format_going_up,
    going_up,
    integers,
)


def main() -> None:
    Z = integers()
    S = MonogenicRing.adjoin_root("x**2 - x")
    integral = IntegralExtension.of(S)
    P = PrimeIdeal.certify(Z.ideal(5))

    for start in ("x", "x - 1"):
        lower = PrimeIdeal.certify(S.ideal(start))
        Q = going_up(integral, P, lower)
        print(format_going_up(integral, P, lower, Q, options=ReportOptions(include_properties=True)))

        # The inclusion lower < Q is strict, and so is its image in ZZ.
        r = Q.ideal.generators()[0]
        if r in lower:
            r = Q.ideal.generators()[-1]
        res = comap_strict_mono_of_integral(integral, lower, Q.ideal, r)
        print(f"  {res.smaller} < {res.larger}, separated by {res.element} (coefficient of T^{res.index})\n")


if __name__ == "__main__":
    main()
