"""Root analysis: Rational Root Theorem, Descartes' rule of signs, Cauchy bound."""

import logging
from collections import namedtuple
from dataclasses import dataclass

import sympy as sp

from ratpoly import config
from ratpoly.errors import ComputationLimitExceeded, DomainError, InvalidArgument
from ratpoly.exact import ONE, ZERO, sign
from ratpoly.number_theory import divisors
from ratpoly.polynomial import Polynomial
from ratpoly.synthetic import synthetic_divide

logger = logging.getLogger(__name__)

RootFactorization = namedtuple("RootFactorization", ["roots", "cofactor"])


@dataclass(frozen=True)
class DescartesReport:
    positive_changes: int
    negative_changes: int
    possible_positive: tuple
    possible_negative: tuple


def _integer_form(poly, clear_denominators):
    if all(c.q == 1 for c in poly.coefficients):
        return poly
    if not clear_denominators:
        raise DomainError(f"Rational Root Theorem needs integer coefficients, got {poly}")
    return poly.primitive()


def rational_roots(poly, clear_denominators=True, candidate_limit=None):
    """All rational roots of ``poly``, each listed once, in ascending order.

    A zero constant term is handled by factoring out the largest power of x
    first (reporting 0 as a root). The remaining factor is searched with the
    Rational Root Theorem: every ``+-p/q`` with ``p | a0`` and ``q | an`` is
    tested by exact evaluation.
    """
    if poly.is_zero:
        raise InvalidArgument("The zero polynomial vanishes everywhere; its roots are not a finite set")
    work = _integer_form(poly, clear_denominators)
    limit = config.MAX_ROOT_CANDIDATES if candidate_limit is None else candidate_limit

    found = set()
    shift = 0
    while work.coefficients[shift] == 0:
        shift += 1
    if shift:
        found.add(ZERO)
        work = Polynomial(work.coefficients[shift:], work.label)
    if work.degree < 1:
        return sorted(found)

    p_divisors = divisors(work.coefficients[0].p)
    q_divisors = divisors(work.leading_coefficient.p)
    candidates = 2 * len(p_divisors) * len(q_divisors)
    if candidates > limit:
        logger.warning("Rational root search for %s needs %d candidates (limit %d)", poly, candidates, limit)
        raise ComputationLimitExceeded("Rational root candidate search", limit)

    tested = set()
    for p in p_divisors:
        for q in q_divisors:
            for candidate in (sp.Rational(p, q), sp.Rational(-p, q)):
                if candidate in tested:
                    continue
                tested.add(candidate)
                if work.evaluate(candidate) == 0:
                    found.add(candidate)

    logger.debug("Tested %d candidates for %s, roots %s", len(tested), poly, sorted(found))
    return sorted(found)


def root_multiplicities(poly, limit=None):
    """Rational roots with multiplicities, plus the cofactor left after dividing them out.

    Each root is divided out with synthetic division until the remainder is
    nonzero. The cofactor has no rational roots and keeps the leading
    coefficient of ``poly``.
    """
    limit = config.MAX_MULTIPLICITY_STEPS if limit is None else limit
    current = poly
    steps = 0
    result = []
    for root in rational_roots(poly):
        multiplicity = 0
        while current.degree >= 1:
            steps += 1
            if steps > limit:
                logger.warning("Root multiplicity search for %s passed %d synthetic divisions", poly, limit)
                raise ComputationLimitExceeded("Root multiplicity search", limit)
            quotient, remainder = synthetic_divide(current, root)
            if remainder != 0:
                break
            current = quotient
            multiplicity += 1
        result.append((root, multiplicity))
    return RootFactorization(result, current)


# Sign changes between consecutive nonzero coefficients
def sign_changes(poly):
    signs = [sign(c) for c in poly.coefficients if c != 0]
    return sum(1 for prev, curr in zip(signs, signs[1:]) if prev != curr)


def descartes_rule_of_signs(poly):
    """Possible numbers of positive and negative real roots, counted with multiplicity.

    Positive roots: the sign changes ``v`` of P's coefficients, then ``v-2``,
    ``v-4``, ... down to 0 or 1. Negative roots: the same for ``P(-x)``,
    obtained by negating the odd-index coefficients.
    """
    positive = sign_changes(poly)
    reflected = Polynomial([-c if i % 2 else c for i, c in enumerate(poly.coefficients)], poly.label)
    negative = sign_changes(reflected)
    return DescartesReport(
        positive_changes=positive,
        negative_changes=negative,
        possible_positive=tuple(range(positive, -1, -2)),
        possible_negative=tuple(range(negative, -1, -2)),
    )


# Every real root r satisfies |r| <= 1 + max_{i<n} |a_i / a_n|
def cauchy_bound(poly):
    if poly.is_zero:
        raise InvalidArgument("The zero polynomial has no root bound")
    if poly.degree == 0:
        return ONE
    lead = poly.leading_coefficient
    return ONE + max(abs(c / lead) for c in poly.coefficients[:-1])
