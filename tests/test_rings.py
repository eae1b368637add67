import pytest
import sympy as sp

from lying_over import (
    ContractViolation,
    MonogenicRing,
    RingHom,
    RingMismatchError,
    dual_numbers,
    integers,
    integers_mod,
    sqrt2_integers,
)


def test_quotient_of_integers_reduces_elements():
    R = integers_mod(6)
    assert R(7) == R.one
    assert R(7) == 1
    assert R(-1) == 5
    assert R.characteristic == 6
    assert str(R) == "ZZ/(6)"


def test_sqrt2_arithmetic():
    S = sqrt2_integers()
    x = S.gen
    assert x * x == 2
    assert (1 + x) ** 2 == S("3 + 2*x")
    assert S("x^3") == S("2*x")
    assert (x - 3) * (x + 3) == -7
    assert str(S) == "ZZ[x]/(x**2 - 2)"
    assert x.to_sympy() == sp.Symbol("x")


def test_mixing_rings_raises():
    S = sqrt2_integers()
    R = integers_mod(5)
    with pytest.raises(RingMismatchError):
        S.gen + R.one
    with pytest.raises(RingMismatchError):
        S.ideal(2) <= R.ideal(2)
    assert S.one != R.one


def test_domains_and_zero_divisors():
    assert integers().is_domain()
    assert sqrt2_integers().is_domain()
    assert integers_mod(5).is_domain()
    assert not integers_mod(6).is_domain()
    assert not dual_numbers().is_domain()

    idem = MonogenicRing.adjoin_root("x**2 - x")
    assert not idem.is_domain()
    assert idem.is_zero_divisor(idem.gen)
    assert not idem.is_zero_divisor(idem("x + 5"))
    assert idem.is_zero_divisor(idem.zero)


def test_ideal_arithmetic_in_integers():
    Z = integers()
    assert (Z.ideal(2) + Z.ideal(3)).is_top()
    assert Z.ideal(2) * Z.ideal(3) == Z.ideal(6)
    assert Z.ideal(6) <= Z.ideal(2)
    assert Z.ideal(6) < Z.ideal(3)
    assert not Z.ideal(2) <= Z.ideal(6)
    assert 12 in Z.ideal(6)
    assert 5 not in Z.ideal(6)
    assert Z.ideal(0).is_bot()
    assert Z.ideal(-4) == Z.ideal(4)


def test_prime_and_maximal_ideals_of_sqrt2():
    S = sqrt2_integers()
    P = S.ideal(7, "x - 3")
    assert P.lattice == ((1, 2), (0, 7))
    assert P.is_prime() and P.is_maximal()
    assert P.contraction() == 7

    assert not S.ideal(7).is_prime()
    assert S.ideal(5).is_prime()
    assert S.ideal(2, "x").is_prime()
    assert S.zero_ideal.is_prime()
    assert not S.zero_ideal.is_maximal()
    assert not S.unit_ideal.is_prime()

    over7 = S.prime_ideals_over(7)
    assert len(over7) == 2
    assert P in over7
    assert len(S.prime_ideals_over(5)) == 1


def test_maximal_ideals_need_finitely_many():
    with pytest.raises(ContractViolation):
        sqrt2_integers().maximal_ideals()

    S = sqrt2_integers()
    Q = S.quotient(S.ideal(14))
    maximal = Q.maximal_ideals()
    # (2, x) over 2 and the two primes over 7.
    assert len(maximal) == 3
    assert all(M.is_maximal() for M in maximal)


def test_comap_along_structure_map():
    S = sqrt2_integers()
    Z = integers()
    f = RingHom.structure_map(S)
    assert S.ideal(7, "x - 3").comap(f) == Z.ideal(7)
    assert S.ideal("x").comap(f) == Z.ideal(2)
    assert S.zero_ideal.comap(f).is_bot()
    assert f.is_injective()
    assert f.map_ideal(Z.ideal(3)) == S.ideal(3)


def test_quotient_map_kernel_and_ill_defined_maps():
    Z = integers()
    q = Z.quotient_map(Z.ideal(6))
    assert q.kernel() == Z.ideal(6)
    assert not q.is_injective()
    assert q(8) == 2

    with pytest.raises(ContractViolation):
        RingHom(integers_mod(5), Z, ((1,),))


def test_localized_integers():
    Z5 = integers().localize(5)
    half = Z5.fraction(1, 2)
    assert half * 2 == 1
    assert Z5("3/4") * 4 == 3
    with pytest.raises(ContractViolation):
        Z5.fraction(1, 5)
    assert Z5.maximal_ideals() == [Z5.ideal(5)]
    assert Z5.ideal(10) == Z5.ideal(5)
    assert Z5.ideal(3).is_top()
    assert str(Z5) == "(ZZ)_(5)"


def test_localization_of_a_quotient():
    R = integers_mod(12).localize(2)
    assert R.characteristic == 4
    assert R(3).denominator == 1
    assert R(5) == 1


def test_localized_rings_localize_and_quotient_further():
    Z5 = integers().localize(5)
    assert Z5.localize(5) is Z5
    assert Z5.localize(7) == integers().localize(0)
    assert Z5.localize(0) == integers().localize(0)

    R = Z5.quotient(Z5.ideal(25))
    assert R == integers_mod(25).localize(5)
    assert R.characteristic == 25
    assert R(3) * R.fraction(1, 3) == 1

    S5 = sqrt2_integers().localize(5)
    f = RingHom.structure_map(S5, Z5)
    bar = f.quotient(S5.ideal(5))
    assert bar.source == integers_mod(5).localize(5)
    assert bar.target.characteristic == 5
    assert f.localize(5) == f
    assert f.localize(0).target == sqrt2_integers().localize(0)


def test_localized_order_has_primes_over_p_and_zero():
    S7 = sqrt2_integers().localize(7)
    assert len(S7.prime_ideals()) == 3
    maximal = S7.maximal_ideals()
    assert len(maximal) == 2
    assert all(M.contraction() == 7 for M in maximal)

    S0 = sqrt2_integers().localize(0)
    assert S0.maximal_ideals() == [S0.zero_ideal]
