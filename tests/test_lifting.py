import pytest

from lying_over import (
    ContractViolation,
    IntegralExtension,
    MonogenicRing,
    PrimeIdeal,
    RandomChoice,
    RingHom,
    choose_by,
    choose_first,
    choose_last,
    cube_root2_integers,
    gaussian_integers,
    going_up,
    integers,
    integers_mod,
    lift_prime,
    lying_over_primes,
    sqrt2_integers,
)


def _prime(Z, n):
    return PrimeIdeal.certify(Z.ideal(n))


def test_lift_inert_prime():
    S = sqrt2_integers()
    Z = integers()
    integral = IntegralExtension.of(S)

    Q = lift_prime(integral, _prime(Z, 5))
    assert Q.ideal == S.ideal(5)
    assert Q.comap(integral.algebra_map).ideal == Z.ideal(5)


def test_lift_split_prime_depends_on_strategy():
    S = sqrt2_integers()
    Z = integers()
    integral = IntegralExtension.of(S)
    P = _prime(Z, 7)

    first = lift_prime(integral, P, strategy=choose_first)
    last = lift_prime(integral, P, strategy=choose_last)
    assert first != last
    for Q in (first, last):
        assert Q.ideal.comap(integral.algebra_map) == P.ideal
        assert Q.ideal in (S.ideal(7, "x - 3"), S.ideal(7, "x + 3"))

    assert len(lying_over_primes(integral, P)) == 2


def test_lift_zero_and_ramified_primes():
    S = sqrt2_integers()
    Z = integers()
    integral = IntegralExtension.of(S)

    assert lift_prime(integral, _prime(Z, 0)).ideal == S.zero_ideal
    assert lift_prime(integral, _prime(Z, 2)).ideal == S.ideal(2, "x")
    assert len(lying_over_primes(integral, _prime(Z, 2))) == 1


@pytest.mark.parametrize("p", [0, 2, 3, 5, 7, 11, 13])
def test_lift_prime_lies_over(p):
    Z = integers()
    for S in (sqrt2_integers(), gaussian_integers(), cube_root2_integers()):
        integral = IntegralExtension.of(S)
        for Q in lying_over_primes(integral, _prime(Z, p)):
            assert Q.ideal.comap(integral.algebra_map) == Z.ideal(p)


def test_random_strategy_returns_some_prime_over_p():
    S = cube_root2_integers()
    Z = integers()
    integral = IntegralExtension.of(S)
    P = _prime(Z, 5)

    options = lying_over_primes(integral, P)
    assert len(options) == 2
    for seed in range(4):
        Q = lift_prime(integral, P, strategy=RandomChoice(seed))
        assert Q in options

    smallest = lift_prime(integral, P, strategy=choose_by(lambda I: I.lattice))
    assert smallest in options


def test_lift_over_a_non_domain():
    S = MonogenicRing.adjoin_root("x**2 - x")
    Z = integers()
    integral = IntegralExtension.of(S)

    over0 = lying_over_primes(integral, _prime(Z, 0))
    assert {Q.ideal.lattice for Q in over0} == {S.ideal("x").lattice, S.ideal("x - 1").lattice}


def test_lift_requires_kernel_inside_prime():
    Z = integers()
    integral = IntegralExtension.of(integers_mod(6))

    assert lift_prime(integral, _prime(Z, 3)).ideal == integral.target.ideal(3)
    with pytest.raises(ContractViolation):
        lift_prime(integral, _prime(Z, 5))


def test_strategy_must_pick_a_candidate():
    S = sqrt2_integers()
    integral = IntegralExtension.of(S)
    with pytest.raises(ContractViolation):
        lift_prime(integral, _prime(integers(), 7), strategy=lambda candidates: S.unit_ideal)

    with pytest.raises(ContractViolation):
        choose_first([])


def test_going_up_in_a_non_domain():
    S = MonogenicRing.adjoin_root("x**2 - x")
    Z = integers()
    integral = IntegralExtension.of(S)
    lower = PrimeIdeal.certify(S.ideal("x"))

    Q = going_up(integral, _prime(Z, 5), lower)
    assert Q.ideal.lattice == ((5, 0), (0, 1))
    assert lower.ideal <= Q.ideal
    assert Q.ideal.comap(integral.algebra_map) == Z.ideal(5)


def test_going_up_in_gaussian_integers():
    S = gaussian_integers()
    Z = integers()
    integral = IntegralExtension.of(S)

    for strategy in (choose_first, choose_last):
        Q = going_up(integral, _prime(Z, 5), PrimeIdeal.certify(S.zero_ideal), strategy=strategy)
        assert Q.ideal.comap(integral.algebra_map) == Z.ideal(5)

    # Starting from a maximal ideal the only possible answer is the ideal itself.
    start = PrimeIdeal.certify(S.ideal(5, "i - 2"))
    assert going_up(integral, _prime(Z, 5), start) == start


def test_going_up_requires_comap_below_prime():
    S = gaussian_integers()
    integral = IntegralExtension.of(S)
    with pytest.raises(ContractViolation):
        going_up(integral, _prime(integers(), 3), PrimeIdeal.certify(S.ideal(5, "i - 2")))


def _localized_sqrt2(p):
    Zp = integers().localize(p)
    Sp = sqrt2_integers().localize(p)
    return Zp, Sp, IntegralExtension.certify(RingHom.structure_map(Sp, Zp))


def test_lift_over_an_already_localized_extension():
    Z5, S5, integral = _localized_sqrt2(5)

    Q = lift_prime(integral, PrimeIdeal.certify(Z5.ideal(5)))
    assert Q.ideal == S5.ideal(5)
    assert Q.ideal.comap(integral.algebra_map) == Z5.ideal(5)

    # (0) of ZZ_(5) needs one more localization, at 0.
    Q0 = lift_prime(integral, PrimeIdeal.certify(Z5.zero_ideal))
    assert Q0.ideal == S5.zero_ideal
    assert Q0.ideal.comap(integral.algebra_map) == Z5.zero_ideal


def test_localized_split_prime_has_two_lifts():
    Z7, S7, integral = _localized_sqrt2(7)
    P = PrimeIdeal.certify(Z7.ideal(7))

    options = lying_over_primes(integral, P)
    assert len(options) == 2
    for Q in options:
        assert Q.ideal.comap(integral.algebra_map) == Z7.ideal(7)
    for strategy in (choose_first, choose_last):
        assert lift_prime(integral, P, strategy=strategy) in options


def test_going_up_over_an_already_localized_extension():
    Z5, S5, integral = _localized_sqrt2(5)

    Q = going_up(integral, PrimeIdeal.certify(Z5.ideal(5)), PrimeIdeal.certify(S5.zero_ideal))
    assert Q.ideal == S5.ideal(5)

    S = MonogenicRing.adjoin_root("x**2 - x").localize(5)
    integral = IntegralExtension.certify(RingHom.structure_map(S, Z5))
    lower = PrimeIdeal.certify(S.ideal("x"))
    Q = going_up(integral, PrimeIdeal.certify(Z5.ideal(5)), lower)
    assert Q.ideal == S.ideal(5, "x")
    assert lower.ideal <= Q.ideal
