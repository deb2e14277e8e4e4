"""Synthetic division by a linear factor and Taylor rebasing."""

from collections import namedtuple

from ratpoly.exact import ZERO, as_rational
from ratpoly.polynomial import Polynomial

SyntheticDivision = namedtuple("SyntheticDivision", ["quotient", "remainder"])


def synthetic_divide(poly, c):
    """Divide ``poly`` by ``(x - c)``.

    Works from the highest coefficient down with ``running = running*c + next``.
    The running values before the last one are the quotient coefficients
    (highest first); the last running value is the remainder, which always
    equals ``poly.evaluate(c)``.
    """
    c = as_rational(c)
    desc = poly.coefficients[::-1]
    running = [desc[0]]
    for coeff in desc[1:]:
        running.append(running[-1] * c + coeff)

    remainder = running[-1]
    quotient_desc = running[:-1] or [ZERO]
    return SyntheticDivision(Polynomial(quotient_desc[::-1], poly.label), remainder)


class TaylorExpansion:
    """A polynomial written in powers of ``(x - center)``.

    ``coefficients[k]`` multiplies ``(x - center)**k``; for a polynomial P these
    are the Taylor coefficients ``P^(k)(center) / k!``.
    """

    __slots__ = ("center", "coefficients", "label")

    def __init__(self, center, coefficients, label=None):
        self.center = as_rational(center)
        self.coefficients = tuple(as_rational(c) for c in coefficients)
        self.label = label

    def __repr__(self):
        return f"TaylorExpansion(center={self.center}, coefficients={list(self.coefficients)})"

    def __eq__(self, other):
        if isinstance(other, TaylorExpansion):
            return self.center == other.center and self.coefficients == other.coefficients
        return NotImplemented

    def __hash__(self):
        return hash((self.center, self.coefficients))

    # Horner in (x - center): value of the expansion at x = center + s
    def evaluate_shifted(self, s):
        s = as_rational(s)
        result = ZERO
        for coeff in reversed(self.coefficients):
            result = result * s + coeff
        return result

    def evaluate(self, x):
        return self.evaluate_shifted(as_rational(x) - self.center)

    # The shifted coefficients as a polynomial in s = x - center
    def shifted_polynomial(self):
        return Polynomial(self.coefficients, self.label)

    # Expand back to ordinary powers of x
    def to_polynomial(self):
        shift = Polynomial([-self.center, 1], self.label)
        return self.shifted_polynomial().compose(shift)


def rebase(poly, a):
    """Re-express ``poly`` about ``a`` by repeated synthetic division.

    Each division by ``(x - a)`` peels off the next Taylor coefficient as its
    remainder; ``deg(poly) + 1`` divisions are made (one for the zero polynomial).
    """
    a = as_rational(a)
    taylor = []
    current = poly
    for _ in range(len(poly.coefficients)):
        current, remainder = synthetic_divide(current, a)
        taylor.append(remainder)
    return TaylorExpansion(a, taylor, poly.label)
