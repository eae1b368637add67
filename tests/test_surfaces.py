import subprocess

import pytest

from lying_over import (
    ContractViolation,
    IntegralExtension,
    PrimeIdeal,
    ReportOptions,
    SingularIdeal,
    format_going_up,
    format_ideal,
    format_lying_over,
    gaussian_integers,
    get_ring,
    going_up,
    integers,
    integers_mod,
    list_available_rings,
    lying_over_primes,
    parse_ideal,
    parse_ring,
    spot_check_prime,
    sqrt2_integers,
)
from lying_over import singular


def test_parse_rings():
    assert parse_ring("ZZ") == integers()
    assert parse_ring("ZZ/(6)") == integers_mod(6)
    assert parse_ring("ZZ/6") == integers_mod(6)
    assert parse_ring("ZZ[x]/(x^2 - 2)") == sqrt2_integers()
    assert parse_ring("ZZ[i]/(i**2 + 1)") == gaussian_integers()
    assert parse_ring("(ZZ[x]/(x**2 - 2))_(7)") == sqrt2_integers().localize(7)

    with pytest.raises(ContractViolation):
        parse_ring("QQ[x]/(x**2 - 2)")
    with pytest.raises(ContractViolation):
        parse_ring("ZZ[x]/(2*x**2 - 1)")


def test_parse_round_trips_printed_rings():
    S = sqrt2_integers()
    for ring in (S, S.quotient(S.ideal(7, "x - 3")), integers_mod(12), S.localize(5)):
        assert parse_ring(str(ring)) == ring


def test_parse_ideals():
    S = sqrt2_integers()
    assert parse_ideal(S, "(7, x - 3)") == S.ideal(7, "x - 3")
    assert parse_ideal(S, "7, x + 3") == S.ideal(7, "x + 3")
    assert parse_ideal(S, "(x + 1)*(x - 1)") == S.ideal(1)
    assert parse_ideal(integers(), "(0)").is_bot()
    assert parse_ideal(integers(), "()").is_bot()


def test_builtin_rings():
    names = list_available_rings()
    assert "sqrt2_integers" in names
    assert get_ring("gaussian_integers") == gaussian_integers()
    with pytest.raises(ValueError):
        get_ring("no_such_ring")


def test_reports():
    S = sqrt2_integers()
    Z = integers()
    integral = IntegralExtension.of(S)
    P = PrimeIdeal.certify(Z.ideal(7))

    text = format_ideal(Z.ideal(5))
    assert "(5) in ZZ" in text
    assert "prime: True" in text

    text = format_ideal(S.ideal(7, "x - 3"), options=ReportOptions(include_lattice=True))
    assert "contraction: 7ZZ" in text
    assert "lattice: [(1, 2), (0, 7)]" in text

    text = format_lying_over(integral, P, lying_over_primes(integral, P))
    assert text.startswith("### Lying over (7)")
    assert "Primes above (2):" in text

    lower = PrimeIdeal.certify(S.zero_ideal)
    result = going_up(integral, P, lower)
    text = format_going_up(integral, P, lower, result)
    assert "### Going up in ZZ[x]/(x**2 - 2)" in text
    assert f"result: {result}" in text


def test_singular_script():
    S = sqrt2_integers()
    sing = SingularIdeal.from_ideal(S.ideal(7, "x - 3"))
    script = sing.to_singular_script(compute_std=True, primary_decomposition=True, comment="split prime")

    assert script.startswith("// split prime")
    assert "ring R = integer,(x),dp;" in script
    assert "ideal I = x^2-2,2*x+1,7*x;" in script
    assert "std(I)" in script
    assert 'LIB "primdecint.lib";' in script
    assert "primdecZ(I)" in script


def test_singular_run_feeds_the_script(monkeypatch):
    seen = {}

    def fake_run(args, **kwargs):
        seen["args"] = args
        seen["input"] = kwargs["input"]
        return subprocess.CompletedProcess(args, 0, stdout="7,x-3\n", stderr="")

    monkeypatch.setattr(singular.shutil, "which", lambda name: "/opt/bin/" + name)
    monkeypatch.setattr(singular.subprocess, "run", fake_run)

    sing = SingularIdeal.from_ideal(sqrt2_integers().ideal(7, "x - 3"))
    assert sing.run() == "7,x-3\n"
    assert seen["args"] == ["/opt/bin/Singular", "-q"]
    assert "std(I)" in seen["input"]
    assert seen["input"].endswith("quit;\n")


def test_singular_run_needs_the_executable(monkeypatch):
    monkeypatch.setattr(singular.shutil, "which", lambda name: None)
    sing = SingularIdeal.from_ideal(sqrt2_integers().ideal(7))
    with pytest.raises(RuntimeError):
        sing.run()
    assert singular._singular_identifier("y_1") == "y_1"
    assert singular._singular_identifier("1y") == "x_1y"


def test_spot_check_prime():
    S = sqrt2_integers()

    res = spot_check_prime(S.ideal(7, "x - 3"), n_samples=100, seed=0)
    assert res["passed"]
    assert res["absorption_failures"] == 0

    # (7) = (7, x - 3)(7, x + 3) is not prime.
    res = spot_check_prime(S.ideal(7), n_samples=600, seed=1)
    assert res["prime_failures"] > 0
    assert not res["passed"]

    with pytest.warns(UserWarning):
        res = spot_check_prime(S.ideal(5), n_samples=0)
    assert res["n_samples"] == 0
