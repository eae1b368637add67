import pytest

from lying_over import (
    ContractViolation,
    MonogenicRing,
    Polynomial,
    PrimeIdeal,
    RingHom,
    comap_strict_mono,
    find_difference_witness,
    find_witness,
    find_witness_in_domain,
    integers,
    sqrt2_integers,
)


def _identity_on_integers():
    return RingHom.structure_map(integers())


def test_witness_for_a_root_in_the_ideal():
    Z = integers()
    f = _identity_on_integers()
    p = Polynomial.from_ints(Z, (-4, 0, 1))  # X^2 - 4

    w = find_witness(f, 2, Z.ideal(2), p)
    assert w.index == 0
    assert w.coefficient == -4
    assert w.coefficient in Z.ideal(4)


def test_witness_skips_vanishing_constant_terms():
    Z = integers()
    f = _identity_on_integers()

    # X^2 - 4X at r = 4: the constant term is zero, so the witness is -4 at X^1.
    w = find_witness(f, 4, Z.ideal(4), Polynomial.from_ints(Z, (0, -4, 1)))
    assert (w.index, w.coefficient) == (1, Z(-4))

    # X^3 - 4X at r = 2.
    w = find_witness(f, 2, Z.ideal(2), Polynomial.from_ints(Z, (0, -4, 0, 1)))
    assert w.index == 1
    assert w.coefficient == -4


def test_witness_preconditions():
    Z = integers()
    f = _identity_on_integers()
    p = Polynomial.from_ints(Z, (-4, 0, 1))

    with pytest.raises(ContractViolation):
        find_witness(f, 2, Z.ideal(3), p)
    with pytest.raises(ContractViolation):
        find_witness(f, 2, Z.ideal(2), Polynomial.from_ints(Z, ()))
    with pytest.raises(ContractViolation):
        find_witness(f, 4, Z.ideal(2), p)

    # x is a zero divisor of ZZ[x]/(x^2 - x).
    S = MonogenicRing.adjoin_root("x**2 - x")
    g = RingHom.structure_map(S)
    with pytest.raises(ContractViolation):
        find_witness(g, "x", S.ideal("x"), Polynomial.from_ints(Z, (0, -1, 1)))


def test_witness_in_domain():
    S = sqrt2_integers()
    f = RingHom.structure_map(S)
    p = Polynomial.from_sympy(integers(), "T**2 + 6*T + 7", "T")

    w = find_witness_in_domain(f, "x - 3", S.ideal(7, "x - 3"), p)
    assert w.index == 0
    assert w.coefficient == 7

    with pytest.raises(ContractViolation):
        find_witness_in_domain(f, 0, S.ideal(7), p)

    idem = MonogenicRing.adjoin_root("x**2 - x")
    with pytest.raises(ContractViolation):
        find_witness_in_domain(RingHom.structure_map(idem), "x", idem.ideal("x"), p)


def test_difference_witness_in_sqrt2():
    S = sqrt2_integers()
    Z = integers()
    f = RingHom.structure_map(S)
    lower = PrimeIdeal.certify(S.zero_ideal)
    upper = S.ideal(7, "x - 3")
    p = Polynomial.from_sympy(Z, "T**2 + 6*T + 7", "T")

    w = find_difference_witness(f, lower, upper, "x - 3", p)
    assert w.index == 0
    assert w.coefficient == 7
    assert w.coefficient in f.comap(upper)
    assert w.coefficient not in f.comap(lower.ideal)


def test_difference_witness_through_a_quotient():
    S = MonogenicRing.adjoin_root("x**2 - x")
    Z = integers()
    f = RingHom.structure_map(S)
    lower = PrimeIdeal.certify(S.ideal("x"))
    upper = S.ideal(5, "x")
    p = Polynomial.from_ints(Z, (-5, 1))  # X - 5; p(x + 5) = x lies in (x)

    w = find_difference_witness(f, lower, upper, "x + 5", p)
    assert w.index == 0
    assert w.coefficient == -5


def test_difference_witness_preconditions():
    S = sqrt2_integers()
    f = RingHom.structure_map(S)
    lower = PrimeIdeal.certify(S.zero_ideal)
    upper = S.ideal(7, "x - 3")
    p = Polynomial.from_sympy(integers(), "T**2 + 6*T + 7", "T")

    # r must not lie in the lower ideal.
    with pytest.raises(ContractViolation):
        find_difference_witness(f, lower, upper, 0, p)
    # lower must be contained in upper.
    with pytest.raises(ContractViolation):
        find_difference_witness(f, PrimeIdeal.certify(S.ideal(5)), upper, "x - 3", p)


def test_difference_witness_over_localized_rings():
    Z7 = integers().localize(7)
    S7 = sqrt2_integers().localize(7)
    f = RingHom.structure_map(S7, Z7)
    lower = PrimeIdeal.certify(S7.zero_ideal)
    upper = S7.ideal(7, "x - 3")
    p = Polynomial.from_sympy(Z7, "T**2 + 6*T + 7", "T")

    w = find_difference_witness(f, lower, upper, "x - 3", p)
    assert w.index == 0
    assert w.coefficient == 7

    res = comap_strict_mono(f, lower, upper, "x - 3", p)
    assert res.smaller == Z7.zero_ideal
    assert res.larger == Z7.ideal(7)
