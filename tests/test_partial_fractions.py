"""Tests for partial-fraction decomposition."""

import pytest
import sympy as sp

from ratpoly.errors import UnsupportedDecomposition
from ratpoly.partial_fractions import PartialFractionTerm, partial_fractions
from ratpoly.polynomial import Polynomial
from ratpoly.rational_function import RationalFunction

R = sp.Rational
x = sp.Symbol("x")


def rf(num, den):
    return RationalFunction(Polynomial(num), Polynomial(den))


def as_expr(result):
    expr = result.quotient.as_expr(x)
    for term in result.terms:
        expr += term.coefficient / (x - term.root) ** term.power
    return expr


def test_reciprocal_of_difference_of_squares():
    original = rf([1], [-1, 0, 1])
    result = partial_fractions(original)
    assert result.quotient.is_zero
    assert result.terms == (
        PartialFractionTerm(R(-1), 1, R(-1, 2)),
        PartialFractionTerm(R(1), 1, R(1, 2)),
    )
    recombined = result.to_rational_function()
    assert recombined == original
    assert recombined.numerator == original.simplify().numerator
    assert recombined.denominator == original.simplify().denominator


def test_repeated_root():
    # 1/(x^2 (x - 1)) = -1/x - 1/x^2 + 1/(x - 1)
    result = partial_fractions(rf([1], [0, 0, -1, 1]))
    assert result.terms == (
        PartialFractionTerm(R(0), 1, R(-1)),
        PartialFractionTerm(R(0), 2, R(-1)),
        PartialFractionTerm(R(1), 1, R(1)),
    )


def test_improper_fraction_splits_off_quotient():
    # x^3/(x^2 - 1) = x + (1/2)/(x + 1) + (1/2)/(x - 1)
    result = partial_fractions(rf([0, 0, 0, 1], [-1, 0, 1]))
    assert result.quotient == Polynomial([0, 1])
    assert [t.coefficient for t in result.terms] == [R(1, 2), R(1, 2)]


def test_common_factor_cancelled_first():
    result = partial_fractions(rf([-1, 1], [-1, 0, 1]))
    assert result.terms == (PartialFractionTerm(R(-1), 1, R(1)),)


def test_non_monic_denominator():
    result = partial_fractions(rf([3], [-2, 0, 2]))
    assert [(t.root, t.coefficient) for t in result.terms] == [(-1, R(-3, 4)), (1, R(3, 4))]


def test_zero_residue_terms_are_kept():
    # ((x-1)^2 + 1)/(x-1)^3 = 1/(x-1) + 0/(x-1)^2 + 1/(x-1)^3
    result = partial_fractions(rf([2, -2, 1], [-1, 3, -3, 1]))
    assert [t.power for t in result.terms] == [1, 2, 3]
    assert [t.coefficient for t in result.terms] == [1, 0, 1]


def test_polynomial_input():
    result = partial_fractions(rf([1, 0, 1], [1]))
    assert result.quotient == Polynomial([1, 0, 1])
    assert result.terms == ()
    assert str(result) == "x^2 + 1"


def test_zero_function():
    result = partial_fractions(rf([0], [1, 1]))
    assert result.quotient.is_zero
    assert result.terms == ()


@pytest.mark.parametrize("den", [
    [1, 0, 1],
    [-1, 1, -1, 1],
])
def test_irreducible_quadratic_factor_unsupported(den):
    with pytest.raises(UnsupportedDecomposition):
        partial_fractions(rf([1], den))


@pytest.mark.parametrize("r", [
    RationalFunction(Polynomial([3, 0, 1]), Polynomial.from_roots([2, 2, 2, -1])),
    RationalFunction(Polynomial([1, -4, 0, 0, 2]), Polynomial.from_roots([R(1, 2), -3, -3]).scale(4)),
    RationalFunction(Polynomial([7]), Polynomial.from_roots([0, 0, 0, 0])),
])
def test_matches_sympy_apart(r):
    result = partial_fractions(r)
    assert sp.simplify(sp.apart(r.as_expr(x), x) - as_expr(result)) == 0
    assert result.to_rational_function() == r
    for point in [5, R(-1, 7), R(13, 3)]:
        assert result.evaluate(point) == r.evaluate(point)


def test_str():
    result = partial_fractions(rf([1], [-1, 0, 1]))
    assert str(result) == "(-1/2)/(x + 1) + (1/2)/(x - 1)"


def test_str_uses_the_function_variable():
    result = partial_fractions(RationalFunction.from_string("(t^3)/(t^2 - 1)"))
    assert result.quotient.label == "t"
    assert str(result) == "t + (1/2)/(t + 1) + (1/2)/(t - 1)"
    term = result.terms[0]
    assert str(term) == "(1/2)/(x + 1)"
    assert term.format_term("s") == "(1/2)/(s + 1)"
