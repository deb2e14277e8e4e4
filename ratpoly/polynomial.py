#Polynomial class

import logging
import re

import numpy as np
import sympy as sp
from sympy.polys.polyerrors import PolynomialError

from ratpoly.config import DEFAULT_VARIABLE
from ratpoly.errors import DivisionByZero, InvalidArgument
from ratpoly.exact import ONE, ZERO, as_rational
from ratpoly.number_theory import as_integer, gcd, lcm

logger = logging.getLogger(__name__)

_TERM = re.compile(
    r"(?P<sign>[+-]?)(?:\((?P<bracketed>\d+(?:\.\d+)?(?:/\d+)?)\)|(?P<coeff>\d+(?:\.\d+)?(?:/\d+)?))?\*?"
    r"(?:(?P<var>[A-Za-z]\w*)(?:(?:\^|\*\*)(?P<power>\d+))?)?"
)


# Drop trailing zero coefficients, keeping a single zero for the zero polynomial
def trim_coefficients(coeffs):
    end = len(coeffs)
    while end > 1 and coeffs[end - 1] == 0:
        end -= 1
    return tuple(coeffs[:end])


# Pad two coefficient arrays with zeros up to a common length (ascending order)
def pad_arrays(arr1, arr2):
    max_len = max(len(arr1), len(arr2))
    arr1_padded = np.pad(arr1, (0, max_len - len(arr1)), mode='constant')
    arr2_padded = np.pad(arr2, (0, max_len - len(arr2)), mode='constant')
    return arr1_padded, arr2_padded


def add_coefficients(coeff1, coeff2):
    coeff1_padded, coeff2_padded = pad_arrays(_as_array(coeff1), _as_array(coeff2))
    return coeff1_padded + coeff2_padded


def subtract_coefficients(coeff1, coeff2):
    coeff1_padded, coeff2_padded = pad_arrays(_as_array(coeff1), _as_array(coeff2))
    return coeff1_padded - coeff2_padded


# Product of two polynomials is the convolution of their coefficient sequences
def multiply_coefficients(coeff1, coeff2):
    return np.convolve(_as_array(coeff1), _as_array(coeff2))


def _as_array(coeffs):
    return np.array(coeffs, dtype=object)


def _check_order(n, what):
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer, sp.Integer)):
        raise InvalidArgument(f"{what} order must be an integer, got {n!r}")
    n = int(n)
    if n < 0:
        raise InvalidArgument(f"{what} order must be non-negative, got {n}")
    return n


class Polynomial:
    """Immutable polynomial with exact rational coefficients.

    ``coefficients[i]`` multiplies ``x**i``. Trailing zeros are trimmed on
    construction, so the leading coefficient is nonzero except for the zero
    polynomial, which is stored as ``(0,)`` and has degree -1. The label only
    affects display.
    """

    __slots__ = ("_coefficients", "_label")

    def __init__(self, coefficients, label=None):
        if isinstance(coefficients, Polynomial):
            label = label if label is not None else coefficients.label
            coefficients = coefficients.coefficients
        if isinstance(coefficients, (str, bytes)):
            raise InvalidArgument("Use Polynomial.from_string to parse text")
        try:
            coefficients = list(coefficients)
        except TypeError as exc:
            raise InvalidArgument(f"Expected a sequence of coefficients, got {coefficients!r}") from exc
        if not coefficients:
            raise InvalidArgument("A polynomial needs at least one coefficient")

        self._coefficients = trim_coefficients([as_rational(c) for c in coefficients])
        self._label = label

    def __repr__(self):
        return self.format_polynomial()

    # Constructors

    @classmethod
    def zero(cls, label=None):
        return cls([ZERO], label)

    @classmethod
    def one(cls, label=None):
        return cls([ONE], label)

    @classmethod
    def monomial(cls, degree, coefficient=1, label=None):
        degree = _check_order(degree, "Monomial")
        return cls([ZERO] * degree + [coefficient], label)

    # Monic polynomial prod(x - r) over the given roots (repeat a root for multiplicity)
    @classmethod
    def from_roots(cls, roots, label=None):
        result = cls.one(label)
        for root in roots:
            result = result * cls([-as_rational(root), ONE], label)
        return result

    @classmethod
    def from_pairs(cls, pairs, label=None):
        coeffs = []
        for numerator, denominator in pairs:
            numerator, denominator = as_integer(numerator), as_integer(denominator)
            if denominator == 0:
                raise InvalidArgument(f"Coefficient pair ({numerator}, {denominator}) has a zero denominator")
            coeffs.append(sp.Rational(numerator, denominator))
        return cls(coeffs, label)

    # Static method to create a Polynomial instance from a string such as "3x^2 - 1/2x + 4"
    @staticmethod
    def from_string(expression):
        coeffs, variable = Polynomial.extract_coefficients(expression)
        return Polynomial(coeffs, variable)

    # Extract ascending coefficients (and the variable name, if any) from a polynomial string
    @staticmethod
    def extract_coefficients(expression):
        text = expression.replace(" ", "")
        terms = re.findall(r"[+-]?[^+-]+", text)
        if not text or "".join(terms) != text:
            raise InvalidArgument(f"Cannot parse polynomial {expression!r}")

        by_power = {}
        variable = None
        for term in terms:
            match = _TERM.fullmatch(term)
            # "(1/2)x" as printed by format_polynomial, or "1/2x"
            coeff = match and (match["bracketed"] or match["coeff"])
            if match is None or (coeff is None and match["var"] is None):
                raise InvalidArgument(f"Cannot parse term {term!r} in {expression!r}")

            coefficient = as_rational(coeff) if coeff else ONE
            if match["sign"] == "-":
                coefficient = -coefficient

            if match["var"] is None:
                power = 0
            else:
                if variable is not None and match["var"] != variable:
                    raise InvalidArgument(f"Only one variable is supported, found {variable!r} and {match['var']!r}")
                variable = match["var"]
                power = int(match["power"]) if match["power"] else 1

            by_power[power] = by_power.get(power, ZERO) + coefficient

        highest_power = max(by_power)
        ordered_coefficients = [by_power.get(i, ZERO) for i in range(highest_power + 1)]
        return ordered_coefficients, variable

    # Convert a sympy expression in one symbol to a Polynomial
    @staticmethod
    def from_expr(expr, symbol=None):
        expr = sp.sympify(expr)
        if symbol is None:
            free = sorted(expr.free_symbols, key=str)
            if len(free) > 1:
                raise InvalidArgument(f"Only univariate expressions are supported, got {expr}")
            symbol = free[0] if free else sp.Symbol(DEFAULT_VARIABLE)
        try:
            coeffs = sp.Poly(expr, symbol).all_coeffs()
        except PolynomialError as exc:
            raise InvalidArgument(f"{expr} is not a polynomial in {symbol}") from exc
        return Polynomial(list(reversed(coeffs)), str(symbol))

    # Accessors

    @property
    def coefficients(self):
        return self._coefficients

    @property
    def label(self):
        return self._label

    @property
    def variable(self):
        return self._label or DEFAULT_VARIABLE

    @property
    def degree(self):
        return -1 if self.is_zero else len(self._coefficients) - 1

    @property
    def is_zero(self):
        return len(self._coefficients) == 1 and self._coefficients[0] == 0

    @property
    def leading_coefficient(self):
        return self._coefficients[-1]

    @property
    def is_monic(self):
        return self.leading_coefficient == 1

    def coefficient(self, n):
        n = _check_order(n, "Coefficient")
        return self._coefficients[n] if n < len(self._coefficients) else ZERO

    def to_pairs(self):
        return [(int(c.p), int(c.q)) for c in self._coefficients]

    def as_expr(self, symbol=None):
        x = symbol if symbol is not None else sp.Symbol(self.variable)
        return sp.Add(*[coeff * x**power for power, coeff in enumerate(self._coefficients)])

    # Equality ignores the display label

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self._coefficients == other._coefficients
        return NotImplemented

    def __hash__(self):
        return hash(self._coefficients)

    def __bool__(self):
        return not self.is_zero

    # Arithmetic

    def _coerce(self, other):
        if isinstance(other, Polynomial):
            return other
        try:
            return Polynomial([other], self._label)
        except InvalidArgument:
            return None

    def _label_with(self, other):
        return self._label if self._label is not None else other._label

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Polynomial(add_coefficients(self._coefficients, other._coefficients), self._label_with(other))

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Polynomial(subtract_coefficients(self._coefficients, other._coefficients), self._label_with(other))

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            try:
                return self.scale(other)
            except InvalidArgument:
                return NotImplemented
        if self.is_zero or other.is_zero:
            return Polynomial.zero(self._label_with(other))
        return Polynomial(multiply_coefficients(self._coefficients, other._coefficients), self._label_with(other))

    __rmul__ = __mul__

    def __neg__(self):
        return Polynomial([-c for c in self._coefficients], self._label)

    def __pos__(self):
        return self

    def __pow__(self, exponent):
        exponent = _check_order(exponent, "Power")
        result = Polynomial.one(self._label)
        for _ in range(exponent):
            result = result * self
        return result

    # Polynomial / Polynomial builds a rational function; division by a scalar scales
    def __truediv__(self, other):
        from ratpoly.rational_function import RationalFunction

        if isinstance(other, Polynomial):
            return RationalFunction(self, other)
        try:
            c = as_rational(other)
        except InvalidArgument:
            return NotImplemented
        if c == 0:
            raise DivisionByZero("Cannot divide a polynomial by zero")
        return self.scale(1 / c)

    def __rtruediv__(self, other):
        from ratpoly.rational_function import RationalFunction

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return RationalFunction(other, self)

    def __floordiv__(self, other):
        return self.divmod(other)[0]

    def __mod__(self, other):
        return self.divmod(other)[1]

    def __divmod__(self, other):
        return self.divmod(other)

    def scale(self, c):
        c = as_rational(c)
        return Polynomial([coeff * c for coeff in self._coefficients], self._label)

    def monic(self):
        if self.is_zero:
            return self
        return self.scale(1 / self.leading_coefficient)

    def primitive(self):
        """Integer polynomial with content 1 and positive leading coefficient.

        Same roots as ``self``; used wherever integer coefficients are required.
        """
        if self.is_zero:
            return self
        multiplier = lcm(*[c.q for c in self._coefficients])
        ints = [int(c.p) * (multiplier // int(c.q)) for c in self._coefficients]
        content = gcd(*ints)
        if ints[-1] < 0:
            content = -content
        return Polynomial([i // content for i in ints], self._label)

    # Evaluation

    # Horner's method: fold from the highest degree down, acc = acc*x + coeff
    def evaluate(self, x):
        x = as_rational(x)
        result = ZERO
        for coeff in reversed(self._coefficients):
            result = result * x + coeff
        return result

    # Running Horner values, highest coefficient first; the last entry is P(x)
    def horner_steps(self, x):
        x = as_rational(x)
        steps = [self._coefficients[-1]]
        for coeff in reversed(self._coefficients[:-1]):
            steps.append(steps[-1] * x + coeff)
        return steps

    def __call__(self, x):
        if isinstance(x, Polynomial):
            return self.compose(x)
        return self.evaluate(x)

    # Calculus

    def derivative(self, n=1):
        n = _check_order(n, "Derivative")
        coeffs = list(self._coefficients)
        for _ in range(n):
            if len(coeffs) <= 1:
                return Polynomial.zero(self._label)
            coeffs = [coeffs[i] * i for i in range(1, len(coeffs))]
        return Polynomial(coeffs, self._label)

    def integral(self, c=0):
        coeffs = [as_rational(c)]
        coeffs.extend(coeff / (i + 1) for i, coeff in enumerate(self._coefficients))
        return Polynomial(coeffs, self._label)

    # Substitute q for x, Horner over polynomials
    def compose(self, q):
        if not isinstance(q, Polynomial):
            q = Polynomial([q], self._label)
        result = Polynomial.zero(q.label)
        for coeff in reversed(self._coefficients):
            result = result * q + Polynomial([coeff], q.label)
        return result

    # Division

    def divmod(self, divisor):
        """Long division: return ``(quotient, remainder)`` with
        ``self == quotient*divisor + remainder`` and ``deg remainder < deg divisor``.
        """
        divisor = self._coerce(divisor)
        if divisor is None:
            raise InvalidArgument("Can only divide a polynomial by a polynomial or a rational")
        if divisor.is_zero:
            raise DivisionByZero("Cannot divide by the zero polynomial")

        label = self._label_with(divisor)
        dq = divisor.degree
        if self.degree < dq:
            return Polynomial.zero(label), Polynomial(self._coefficients, label)

        remainder = list(self._coefficients)
        lead = divisor.leading_coefficient
        quotient = [ZERO] * (self.degree - dq + 1)
        for k in range(self.degree - dq, -1, -1):
            factor = remainder[k + dq] / lead
            quotient[k] = factor
            if factor != 0:
                for j, dc in enumerate(divisor.coefficients):
                    remainder[k + j] -= factor * dc
        return Polynomial(quotient, label), Polynomial(remainder[:dq] or [ZERO], label)

    # Euclidean algorithm; the result is monic, or zero when both inputs are zero
    def gcd(self, other):
        other = self._coerce(other)
        if other is None:
            raise InvalidArgument("Can only take the gcd of polynomials")
        a, b = self, other
        steps = 0
        while not b.is_zero:
            a, b = b, a.divmod(b)[1]
            steps += 1
        result = a.monic()
        logger.debug("gcd(%s, %s) = %s after %d division steps", self, other, result, steps)
        return result

    # Formatting

    def format_polynomial(self):
        if self.is_zero:
            return "0"

        result = ""
        first_term = True  # Flag to track the first non-zero term
        for power in range(len(self._coefficients) - 1, -1, -1):
            coefficient = self._coefficients[power]

            # Skip if the coefficient is zero
            if coefficient == 0:
                continue

            magnitude = abs(coefficient)
            if power == 0:
                poly = f"{magnitude}"
            else:
                if magnitude == 1:
                    prefix = ""
                elif magnitude.q == 1:
                    prefix = f"{magnitude}"
                else:
                    prefix = f"({magnitude})"
                poly = f"{prefix}{self.variable}" if power == 1 else f"{prefix}{self.variable}^{power}"

            # Handle the sign of the coefficient
            if first_term:
                result += f"-{poly}" if coefficient < 0 else poly
                first_term = False
            else:
                result += f" - {poly}" if coefficient < 0 else f" + {poly}"

        return result


def polynomial_gcd(*polys):
    result = Polynomial.zero()
    for p in polys:
        result = result.gcd(p)
    return result
