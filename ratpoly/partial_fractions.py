"""Partial-fraction decomposition over the rationals.

A rational function is split into a polynomial part plus terms
``c / (x - r)**k`` for every rational pole ``r``. The coefficients come from
the residue formula: with ``g(x) = (x - r)**m * R(x)``,

    c_m     = g(r)
    c_(m-k) = g^(k)(r) / k!      for k = 1 .. m-1

Denominators with factors that have no rational root (``x**2 + 1``, say) are
rejected with ``UnsupportedDecomposition``.
"""

import logging
from dataclasses import dataclass

from ratpoly.config import DEFAULT_VARIABLE
from ratpoly.errors import UnsupportedDecomposition
from ratpoly.exact import as_rational
from ratpoly.number_theory import factorial
from ratpoly.polynomial import Polynomial
from ratpoly.rational_function import RationalFunction
from ratpoly.roots import root_multiplicities
from ratpoly.synthetic import synthetic_divide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartialFractionTerm:
    root: object
    power: int
    coefficient: object

    def __str__(self):
        return self.format_term()

    def format_term(self, variable=DEFAULT_VARIABLE):
        factor = f"({variable} - {self.root})" if self.root >= 0 else f"({variable} + {-self.root})"
        if self.power > 1:
            factor = f"{factor}^{self.power}"
        return f"({self.coefficient})/{factor}"

    def as_rational_function(self, label=None):
        return RationalFunction(Polynomial([self.coefficient], label),
                                Polynomial.from_roots([self.root] * self.power, label))

    def evaluate(self, x):
        return self.coefficient / (as_rational(x) - self.root) ** self.power


@dataclass(frozen=True)
class PartialFractionResult:
    quotient: Polynomial
    terms: tuple

    def __str__(self):
        parts = [term.format_term(self.quotient.variable) for term in self.terms]
        if not self.quotient.is_zero or not parts:
            parts.insert(0, str(self.quotient))
        return " + ".join(parts)

    # Sum the terms back up with rational-function addition, then reduce
    def to_rational_function(self):
        total = RationalFunction(self.quotient)
        for term in self.terms:
            total = total + term.as_rational_function(self.quotient.label)
        return total.simplify()

    def evaluate(self, x):
        x = as_rational(x)
        value = self.quotient.evaluate(x)
        for term in self.terms:
            value += term.evaluate(x)
        return value


def _residues(numerator, cofactor, root, multiplicity):
    g = RationalFunction(numerator, cofactor)
    coefficients = {}
    for k in range(multiplicity):
        if k:
            g = g.derivative()
        coefficients[multiplicity - k] = g.evaluate(root) / factorial(k)
    return [coefficients[power] for power in range(1, multiplicity + 1)]


def partial_fractions(rational_function, limit=None):
    """Decompose ``rational_function`` into a polynomial part and simple fractions.

    The function is simplified first, so common factors never show up as
    spurious poles. Terms are ordered by root, then by power; every pole of
    multiplicity ``m`` contributes exactly ``m`` terms (a coefficient may be 0).
    """
    label = rational_function.numerator.label or rational_function.denominator.label
    reduced = rational_function.simplify()
    numerator, denominator = reduced.numerator, reduced.denominator

    quotient = Polynomial.zero(label)
    if numerator.degree >= denominator.degree:
        quotient, numerator = numerator.divmod(denominator)
        quotient = Polynomial(quotient, label)
    if denominator.degree < 1 or numerator.is_zero:
        return PartialFractionResult(quotient, ())

    factorization = root_multiplicities(denominator, limit=limit)
    if factorization.cofactor.degree > 0:
        raise UnsupportedDecomposition(
            f"Denominator {denominator} has the factor {factorization.cofactor} with no rational roots"
        )

    terms = []
    for root, multiplicity in factorization.roots:
        cofactor = denominator
        for _ in range(multiplicity):
            cofactor = synthetic_divide(cofactor, root).quotient
        residues = _residues(numerator, cofactor, root, multiplicity)
        logger.debug("Pole %s of multiplicity %d: residues %s", root, multiplicity, residues)
        terms.extend(PartialFractionTerm(root, power, c) for power, c in enumerate(residues, start=1))

    return PartialFractionResult(quotient, tuple(terms))
