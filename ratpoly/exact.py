"""Exact rational values.

All coefficients and evaluation points are sympy Rationals (sympy Integers
for integral values), which are kept in lowest terms with a positive
denominator. This module is the single place user input is coerced.
"""

from fractions import Fraction

import numpy as np
import sympy as sp

from ratpoly.errors import InvalidArgument

ZERO = sp.Integer(0)
ONE = sp.Integer(1)


def as_rational(value):
    """Coerce ``value`` to a sympy Rational without any loss of precision.

    Accepts ints (including numpy integers), Fractions, sympy rationals and
    strings such as ``"-3/4"`` or ``"0.125"``. Floats are rejected because
    their binary value is rarely the number the caller meant.
    """
    if isinstance(value, sp.Rational):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgument(f"Expected a rational number, got boolean {value!r}")
    if isinstance(value, (int, np.integer)):
        return sp.Integer(int(value))
    if isinstance(value, Fraction):
        return sp.Rational(value.numerator, value.denominator)
    if isinstance(value, str):
        try:
            parsed = sp.Rational(value.strip())
        except (TypeError, ValueError, ZeroDivisionError) as exc:
            raise InvalidArgument(f"Cannot parse {value!r} as a rational number") from exc
        if not isinstance(parsed, sp.Rational):
            raise InvalidArgument(f"{value!r} is not a finite rational number")
        return parsed
    if isinstance(value, (float, np.floating, sp.Float)):
        raise InvalidArgument(f"Floating-point value {value!r} is not exact; pass a Fraction or string")
    raise InvalidArgument(f"Cannot convert {type(value).__name__} to a rational number")


def is_integral(value):
    return as_rational(value).q == 1


def sign(value):
    r = as_rational(value)
    return (r.p > 0) - (r.p < 0)


def floor(value):
    r = as_rational(value)
    return r.p // r.q


def ceiling(value):
    r = as_rational(value)
    return -((-r.p) // r.q)
