#Rational function class: a quotient of two polynomials

import logging
import re

import numpy as np
import sympy as sp

from ratpoly.errors import DivisionByZero, InvalidArgument
from ratpoly.exact import as_rational
from ratpoly.polynomial import Polynomial, _check_order
from ratpoly.roots import rational_roots

logger = logging.getLogger(__name__)


def _as_polynomial(value):
    if isinstance(value, Polynomial):
        return value
    if isinstance(value, (list, tuple, np.ndarray)):
        return Polynomial(value)
    return Polynomial([value])


class RationalFunction:
    """``numerator / denominator`` over the rationals.

    Arithmetic follows the field-of-fractions rules and does not reduce the
    result; call ``simplify()`` for the canonical form (common factors
    cancelled, monic denominator).
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator, denominator=1):
        self._numerator = _as_polynomial(numerator)
        self._denominator = _as_polynomial(denominator)
        if self._denominator.is_zero:
            raise DivisionByZero("The denominator cannot be the zero polynomial.")

    def __repr__(self):
        # Check if the denominator is effectively 1
        if self._denominator == Polynomial.one():
            return f"({self._numerator})"
        return f"({self._numerator})/({self._denominator})"

    # Static method to parse "(num)/(den)", "(num)" as printed by __repr__,
    # or "num/den" when the coefficients contain no '/'
    @staticmethod
    def from_string(expression):
        expression = expression.replace(' ', '')
        match = re.fullmatch(r"\((.+)\)/\((.+)\)", expression)
        if match:
            numerator_str, denominator_str = match.groups()
        elif re.fullmatch(r"\((?:[^()]|\([^()]*\))*\)", expression):
            numerator_str, denominator_str = expression[1:-1], "1"
        elif expression.count('/') == 1:
            numerator_str, denominator_str = (part.strip("()") for part in expression.split('/'))
        else:
            raise InvalidArgument(f"Expression {expression!r} does not represent a rational function")

        numerator = Polynomial.from_string(numerator_str)
        denominator = Polynomial.from_string(denominator_str)
        return RationalFunction(numerator, denominator)

    @staticmethod
    def from_pairs(numerator_pairs, denominator_pairs, label=None):
        return RationalFunction(Polynomial.from_pairs(numerator_pairs, label),
                                Polynomial.from_pairs(denominator_pairs, label))

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @property
    def is_zero(self):
        return self._numerator.is_zero

    @property
    def is_proper(self):
        return self._numerator.degree < self._denominator.degree

    def to_pairs(self):
        return self._numerator.to_pairs(), self._denominator.to_pairs()

    def as_expr(self, symbol=None):
        return self._numerator.as_expr(symbol) / self._denominator.as_expr(symbol)

    # Equality check by cross-multiplication: a/b == c/d iff a*d == b*c
    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        left = self._numerator * other._denominator
        right = self._denominator * other._numerator
        return left == right

    # A polynomial in disguise hashes like the polynomial it equals
    def __hash__(self):
        reduced = self.simplify()
        if reduced._denominator == Polynomial.one():
            return hash(reduced._numerator)
        return hash((reduced._numerator, reduced._denominator))

    def _coerce(self, other):
        if isinstance(other, RationalFunction):
            return other
        try:
            return RationalFunction(_as_polynomial(other))
        except InvalidArgument:
            return None

    # Addition: a/b + c/d = (a*d + c*b) / (b*d)
    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        new_numerator = (self._numerator * other._denominator) + (other._numerator * self._denominator)
        new_denominator = self._denominator * other._denominator
        logger.debug("Addition: (%s) * (%s) + (%s) * (%s) = (%s)/(%s)",
                     self._numerator, other._denominator, other._numerator, self._denominator,
                     new_numerator, new_denominator)
        return RationalFunction(new_numerator, new_denominator)

    __radd__ = __add__

    # Subtraction: a/b - c/d = (a*d - c*b) / (b*d)
    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        new_numerator = (self._numerator * other._denominator) - (other._numerator * self._denominator)
        new_denominator = self._denominator * other._denominator
        logger.debug("Subtraction: (%s) * (%s) - (%s) * (%s) = (%s)/(%s)",
                     self._numerator, other._denominator, other._numerator, self._denominator,
                     new_numerator, new_denominator)
        return RationalFunction(new_numerator, new_denominator)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    # Multiplication: a/b * c/d = (a*c) / (b*d)
    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        new_numerator = self._numerator * other._numerator
        new_denominator = self._denominator * other._denominator
        logger.debug("Multiplication: (%s)/(%s)", new_numerator, new_denominator)
        return RationalFunction(new_numerator, new_denominator)

    __rmul__ = __mul__

    # Division: a/b / c/d = (a*d) / (b*c), undefined when c is zero
    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other._numerator.is_zero:
            raise DivisionByZero("Cannot divide by a rational function whose numerator is zero")
        new_numerator = self._numerator * other._denominator
        new_denominator = self._denominator * other._numerator
        logger.debug("Division: (%s)/(%s)", new_numerator, new_denominator)
        return RationalFunction(new_numerator, new_denominator)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self):
        return RationalFunction(-self._numerator, self._denominator)

    def __pow__(self, exponent):
        if isinstance(exponent, (int, np.integer, sp.Integer)) and not isinstance(exponent, bool) and exponent < 0:
            return self.reciprocal() ** -exponent
        exponent = _check_order(exponent, "Power")
        return RationalFunction(self._numerator ** exponent, self._denominator ** exponent)

    def reciprocal(self):
        if self._numerator.is_zero:
            raise DivisionByZero("The zero rational function has no reciprocal")
        return RationalFunction(self._denominator, self._numerator)

    def simplify(self):
        """Cancel the gcd of numerator and denominator and make the denominator monic.

        The result is canonical: simplifying it again returns an equal pair,
        and the zero function becomes ``0/1``.
        """
        g = self._numerator.gcd(self._denominator)
        numerator = self._numerator // g
        denominator = self._denominator // g
        lead = denominator.leading_coefficient
        result = RationalFunction(numerator.scale(1 / lead), denominator.scale(1 / lead))
        logger.debug("Simplified (%s)/(%s) by gcd %s: %s", self._numerator, self._denominator, g, result)
        return result

    def evaluate(self, x):
        x = as_rational(x)
        d = self._denominator.evaluate(x)
        if d == 0:
            raise DivisionByZero(f"x = {x} is a pole of {self}")
        return self._numerator.evaluate(x) / d

    def __call__(self, x):
        return self.evaluate(x)

    # Quotient rule, (N'D - ND') / D^2, reduced after every step to keep degrees small
    def derivative(self, n=1):
        n = _check_order(n, "Derivative")
        result = self
        for _ in range(n):
            num, den = result._numerator, result._denominator
            result = RationalFunction(num.derivative() * den - num * den.derivative(), den * den).simplify()
        return result

    # Rational roots of the denominator, as given (no implicit cancellation)
    def poles(self):
        return rational_roots(self._denominator)

    # Rational roots of the numerator, as given (no implicit cancellation)
    def zeros(self):
        return rational_roots(self._numerator)
