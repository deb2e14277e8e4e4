"""Tests for polynomial construction, arithmetic, calculus and division."""

from fractions import Fraction

import pytest
import sympy as sp

from ratpoly.errors import DivisionByZero, InvalidArgument
from ratpoly.polynomial import Polynomial, polynomial_gcd
from ratpoly.rational_function import RationalFunction

R = sp.Rational
x = sp.Symbol("x")

SAMPLES = [
    Polynomial([1, 2, 3]),
    Polynomial([R(1, 2), 0, -4, R(2, 3)]),
    Polynomial([-7]),
    Polynomial([0, 0, 0, 5]),
    Polynomial([0]),
    Polynomial([R(-3, 5), 1]),
]

POINTS = [0, 1, -2, R(1, 2), R(-7, 3), R(22, 9)]


def naive_evaluate(poly, value):
    value = R(value)
    return sum((c * value**i for i, c in enumerate(poly.coefficients)), R(0))


def test_trailing_zeros_trimmed():
    p = Polynomial([1, 2, 0, 0])
    assert p.coefficients == (1, 2)
    assert p.degree == 1


def test_zero_polynomial_is_canonical():
    p = Polynomial([0, 0, 0])
    assert p.coefficients == (0,)
    assert p.degree == -1
    assert p.is_zero
    assert p == Polynomial.zero()


def test_empty_coefficients_rejected():
    with pytest.raises(InvalidArgument):
        Polynomial([])


def test_float_coefficients_rejected():
    with pytest.raises(InvalidArgument):
        Polynomial([1, 0.5])


def test_coefficients_are_exact_rationals():
    p = Polynomial([Fraction(1, 3), "2/4", 5])
    assert p.coefficients == (R(1, 3), R(1, 2), 5)
    assert all(isinstance(c, sp.Rational) for c in p.coefficients)


@pytest.mark.parametrize("p", SAMPLES)
def test_round_trip_through_coefficients(p):
    assert Polynomial(p.coefficients) == p


def test_label_is_display_only():
    p = Polynomial([1, 1], label="t")
    assert p == Polynomial([1, 1])
    assert hash(p) == hash(Polynomial([1, 1]))
    assert str(p) == "t + 1"


def test_accessors():
    p = Polynomial([4, 0, -2])
    assert p.leading_coefficient == -2
    assert p.coefficient(1) == 0
    assert p.coefficient(9) == 0
    assert not p.is_monic
    assert p.monic() == Polynomial([-2, 0, 1])


@pytest.mark.parametrize("p", SAMPLES)
@pytest.mark.parametrize("q", SAMPLES)
def test_add_commutes(p, q):
    assert p + q == q + p


def test_mul_associative_and_distributive():
    p, q, r = SAMPLES[0], SAMPLES[1], SAMPLES[5]
    assert p * (q * r) == (p * q) * r
    assert p * (q + r) == p * q + p * r


def test_add_sub():
    p = Polynomial([1, 2, 3])
    q = Polynomial([1, 1])
    assert p + q == Polynomial([2, 3, 3])
    assert p - q == Polynomial([0, 1, 3])
    assert (p - p).is_zero
    assert (p + Polynomial([0, 0, -3])).degree == 1


def test_mul():
    p = Polynomial([-1, 1])
    q = Polynomial([1, 1])
    assert p * q == Polynomial([-1, 0, 1])
    assert (p * Polynomial.zero()).is_zero
    assert (p * q).degree == p.degree + q.degree


def test_scale_and_neg():
    p = Polynomial([2, -4])
    assert p.scale(R(1, 2)) == Polynomial([1, -2])
    assert -p == Polynomial([-2, 4])
    assert p * Fraction(1, 2) == Polynomial([1, -2])
    assert 3 * p == Polynomial([6, -12])
    assert p.scale(0).is_zero


def test_scalar_add():
    p = Polynomial([2, -4])
    assert p + 1 == Polynomial([3, -4])
    assert 1 - p == Polynomial([-1, 4])


def test_pow():
    assert Polynomial([1, 1]) ** 3 == Polynomial([1, 3, 3, 1])
    assert Polynomial([1, 1]) ** 0 == Polynomial.one()


def test_from_roots():
    assert Polynomial.from_roots([2, 3]) == Polynomial([6, -5, 1])
    assert Polynomial.from_roots([]) == Polynomial.one()


def test_monomial():
    assert Polynomial.monomial(3, R(1, 2)) == Polynomial([0, 0, 0, R(1, 2)])


@pytest.mark.parametrize("p", SAMPLES)
@pytest.mark.parametrize("value", POINTS)
def test_horner_matches_naive_sum(p, value):
    assert p.evaluate(value) == naive_evaluate(p, value)


def test_evaluate_examples():
    assert Polynomial([1, 2, 3]).evaluate(2) == 17
    assert Polynomial([1, 2, 1])(Fraction(1, 2)) == R(9, 4)
    assert Polynomial([5, 2, 3]).evaluate(0) == 5


def test_horner_steps():
    assert Polynomial([1, 2, 3]).horner_steps(2) == [3, 8, 17]


def test_derivative():
    p = Polynomial([1, 2, 3])
    assert p.derivative() == Polynomial([2, 6])
    assert p.derivative(2) == Polynomial([6])
    assert p.derivative(3).is_zero
    assert p.derivative(0) == p


@pytest.mark.parametrize("order", [1.5, -1, "2"])
def test_derivative_order_must_be_natural(order):
    with pytest.raises(InvalidArgument):
        Polynomial([1, 2, 3]).derivative(order)


def test_integral():
    assert Polynomial([2, 6]).integral(1) == Polynomial([1, 2, 3])
    assert Polynomial([1]).integral() == Polynomial([0, 1])
    assert Polynomial.zero().integral(R(1, 2)) == Polynomial([R(1, 2)])


@pytest.mark.parametrize("p", SAMPLES)
def test_derivative_undoes_integral(p):
    assert p.integral(0).derivative() == p


def test_compose():
    square = Polynomial([0, 0, 1])
    shift = Polynomial([1, 1])
    assert square.compose(shift) == Polynomial([1, 2, 1])
    assert square(shift) == Polynomial([1, 2, 1])
    assert shift.compose(square) == Polynomial([1, 0, 1])


@pytest.mark.parametrize("value", POINTS)
def test_compose_evaluates_as_nested_call(value):
    p, q = SAMPLES[1], SAMPLES[0]
    assert p.compose(q).evaluate(value) == p.evaluate(q.evaluate(value))


def test_divmod_exact():
    quotient, remainder = Polynomial([-1, 0, 0, 1]).divmod(Polynomial([-1, 1]))
    assert quotient == Polynomial([1, 1, 1])
    assert remainder.is_zero


@pytest.mark.parametrize("p", SAMPLES)
@pytest.mark.parametrize("d", [Polynomial([1, 0, 2]), Polynomial([R(-1, 3), 1]), Polynomial([4])])
def test_divmod_invariant(p, d):
    quotient, remainder = divmod(p, d)
    assert quotient * d + remainder == p
    assert remainder.degree < d.degree or remainder.is_zero


def test_divmod_matches_sympy():
    p = Polynomial([5, 2, 0, 1])
    d = Polynomial([1, 0, 2])
    q_expr, r_expr = sp.div(p.as_expr(), d.as_expr(), x, domain="QQ")
    assert p // d == Polynomial.from_expr(q_expr, x)
    assert p % d == Polynomial.from_expr(r_expr, x)


def test_divide_by_zero_polynomial():
    with pytest.raises(DivisionByZero):
        Polynomial([1, 1]).divmod(Polynomial.zero())
    with pytest.raises(ZeroDivisionError):
        Polynomial([1, 1]) // Polynomial([0])


def test_gcd_is_monic():
    p = Polynomial.from_roots([1, 2]).scale(2)
    q = Polynomial.from_roots([1, -3]).scale(3)
    assert p.gcd(q) == Polynomial([-1, 1])


def test_gcd_coprime_and_zero():
    assert Polynomial([1, 1]).gcd(Polynomial([-1, 1])) == Polynomial.one()
    assert Polynomial([2, 4]).gcd(Polynomial.zero()) == Polynomial([R(1, 2), 1])
    assert Polynomial.zero().gcd(Polynomial.zero()).is_zero


def test_polynomial_gcd_of_many():
    common = Polynomial([-2, 1])
    polys = [common * Polynomial([1, 1]), common * Polynomial([3, 1]), common * common]
    assert polynomial_gcd(*polys) == common


def test_primitive():
    p = Polynomial([R(1, 2), R(-1, 3)])
    assert p.primitive() == Polynomial([-3, 2])
    assert Polynomial([4, 6]).primitive() == Polynomial([2, 3])


def test_true_division_builds_rational_function():
    rf = Polynomial([1]) / Polynomial([-1, 0, 1])
    assert isinstance(rf, RationalFunction)
    assert rf.denominator == Polynomial([-1, 0, 1])
    assert Polynomial([2, 4]) / 2 == Polynomial([1, 2])
    with pytest.raises(DivisionByZero):
        Polynomial([2, 4]) / 0


def test_from_string():
    p = Polynomial.from_string("3x^2 - 1/2x + 4")
    assert p == Polynomial([4, R(-1, 2), 3])
    assert p.label == "x"
    assert Polynomial.from_string("t^3 - t").label == "t"
    assert Polynomial.from_string("-x") == Polynomial([0, -1])
    assert Polynomial.from_string("2*x**2 + x + x") == Polynomial([0, 2, 2])
    assert Polynomial.from_string("7") == Polynomial([7])


@pytest.mark.parametrize("text", ["", "3x^2 +* 4", "x + y", "x^"])
def test_from_string_rejects_garbage(text):
    with pytest.raises(InvalidArgument):
        Polynomial.from_string(text)


def test_format():
    assert str(Polynomial([4, R(-1, 2), 3])) == "3x^2 - (1/2)x + 4"
    assert str(Polynomial([0, -1])) == "-x"
    assert str(Polynomial([0])) == "0"
    assert str(Polynomial([-1, 0, 1])) == "x^2 - 1"
    assert str(Polynomial([0, 11])) == "11x"


@pytest.mark.parametrize("p", [
    Polynomial([4, -1, 3, 0, -12]),
    Polynomial([4, R(-1, 2), 3]),
    Polynomial([R(1, 3), 0, R(-7, 4), R(5, 2)]),
    Polynomial([0, R(2, 9)], label="t"),
])
def test_format_parses_back(p):
    assert Polynomial.from_string(str(p)) == p


def test_from_string_bracketed_coefficients():
    assert Polynomial.from_string("(1/2)x^2 - (3/4)x + 1/5") == Polynomial([R(1, 5), R(-3, 4), R(1, 2)])
    assert Polynomial.from_string("-(2)x") == Polynomial([0, -2])
    with pytest.raises(InvalidArgument):
        Polynomial.from_string("(1/2x")


def test_pairs_round_trip():
    p = Polynomial([R(1, 2), -3], label="s")
    assert p.to_pairs() == [(1, 2), (-3, 1)]
    q = Polynomial.from_pairs(p.to_pairs(), "s")
    assert q == p
    assert q.label == "s"
    with pytest.raises(InvalidArgument):
        Polynomial.from_pairs([(1, 0)])


def test_sympy_interop():
    p = Polynomial([1, 0, R(2, 3)])
    assert sp.expand(p.as_expr() - (1 + R(2, 3) * x**2)) == 0
    assert Polynomial.from_expr((x - 1) * (x + 2)) == Polynomial([-2, 1, 1])
    with pytest.raises(InvalidArgument):
        Polynomial.from_expr(1 / x)
