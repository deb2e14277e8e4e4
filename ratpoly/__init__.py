"""
ratpoly: exact rational polynomial algebra.

Polynomials over Q, synthetic division and Taylor rebasing, rational root
analysis, rational functions and partial fractions. All values are exact
sympy Rationals and every object is immutable.
"""

from ratpoly.errors import (
    ComputationLimitExceeded,
    DivisionByZero,
    DomainError,
    InvalidArgument,
    RatPolyError,
    UnsupportedDecomposition,
)
from ratpoly.exact import as_rational
from ratpoly.number_theory import divisors, ext_gcd, factorial, gcd, is_prime, lcm, mod_inverse
from ratpoly.polynomial import Polynomial, polynomial_gcd
from ratpoly.synthetic import SyntheticDivision, TaylorExpansion, rebase, synthetic_divide
from ratpoly.roots import (
    DescartesReport,
    RootFactorization,
    cauchy_bound,
    descartes_rule_of_signs,
    rational_roots,
    root_multiplicities,
    sign_changes,
)
from ratpoly.rational_function import RationalFunction
from ratpoly.partial_fractions import PartialFractionResult, PartialFractionTerm, partial_fractions

__all__ = [
    # Errors
    "ComputationLimitExceeded",
    "DivisionByZero",
    "DomainError",
    "InvalidArgument",
    "RatPolyError",
    "UnsupportedDecomposition",
    # Exact values and integers
    "as_rational",
    "divisors",
    "ext_gcd",
    "factorial",
    "gcd",
    "is_prime",
    "lcm",
    "mod_inverse",
    # Polynomials
    "Polynomial",
    "polynomial_gcd",
    "SyntheticDivision",
    "TaylorExpansion",
    "rebase",
    "synthetic_divide",
    # Roots
    "DescartesReport",
    "RootFactorization",
    "cauchy_bound",
    "descartes_rule_of_signs",
    "rational_roots",
    "root_multiplicities",
    "sign_changes",
    # Rational functions
    "RationalFunction",
    "PartialFractionResult",
    "PartialFractionTerm",
    "partial_fractions",
]
