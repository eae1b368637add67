"""Export the primes of ZZ[2**(1/3)] above 5 to Singular.

Run from the repository root:

    python examples/example_singular_export.py

If a `Singular` executable is on PATH the script is executed as well.
"""

import shutil

from lying_over import (
    IntegralExtension,
    PrimeIdeal,
    SingularIdeal,
    cube_root2_integers,
    integers,
    lying_over_primes,
    minimal_polynomial,
)


def main() -> None:
    S = cube_root2_integers()
    integral = IntegralExtension.of(S)
    P = PrimeIdeal.certify(integers().ideal(5))

    print("Minimal polynomial of x:", minimal_polynomial(integral, "x"))
    for k, Q in enumerate(lying_over_primes(integral, P)):
        sing = SingularIdeal.from_ideal(Q.ideal)
        script = sing.to_singular_script(
            ideal_name=f"Q{k}",
            compute_std=True,
            comment=f"prime {Q} of {S} over (5)",
        )
        print(script)
        if shutil.which("Singular"):
            print(sing.run(script=script))


if __name__ == "__main__":
    main()
