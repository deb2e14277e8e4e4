# Integer helpers used by root analysis and simplification

import logging
from math import isqrt

import sympy as sp
from sympy.core.intfunc import igcdex
from scipy.special import factorial as _scipy_factorial

from ratpoly import config
from ratpoly.errors import ComputationLimitExceeded, DivisionByZero, DomainError, InvalidArgument
from ratpoly.exact import as_rational

logger = logging.getLogger(__name__)


def as_integer(value):
    r = as_rational(value)
    if r.q != 1:
        raise DomainError(f"Expected an integer, got {r}")
    return int(r.p)


# Greatest common divisor of any number of integers (0 for no arguments)
def gcd(*values):
    ints = [as_integer(v) for v in values]
    if not ints:
        return 0
    if len(ints) == 1:
        return abs(ints[0])
    return int(sp.igcd(*ints))


# Least common multiple; 0 if any argument is 0, 1 for no arguments
def lcm(*values):
    ints = [as_integer(v) for v in values]
    if not ints:
        return 1
    if any(i == 0 for i in ints):
        return 0
    if len(ints) == 1:
        return abs(ints[0])
    return int(sp.ilcm(*ints))


def ext_gcd(a, b):
    """Extended Euclid: return ``(g, x, y)`` with ``a*x + b*y == g`` and ``g >= 0``."""
    x, y, g = igcdex(as_integer(a), as_integer(b))
    return int(g), int(x), int(y)


def mod_inverse(a, m):
    a, m = as_integer(a), as_integer(m)
    if m == 0:
        raise InvalidArgument("Modulus cannot be zero")
    g, x, _ = ext_gcd(a, m)
    if g != 1:
        raise DivisionByZero(f"No modular inverse: gcd({a}, {m}) = {g}")
    return x % abs(m)


def divisors(n, limit=None):
    """Sorted positive divisors of ``|n|`` by trial division up to ``sqrt(|n|)``."""
    n = abs(as_integer(n))
    if n == 0:
        raise InvalidArgument("Every integer divides 0; divisors(0) is undefined")
    limit = config.MAX_TRIAL_DIVISIONS if limit is None else limit
    root = isqrt(n)
    if root > limit:
        logger.warning("divisors(%d) needs %d trial divisions (limit %d)", n, root, limit)
        raise ComputationLimitExceeded(f"Divisor enumeration of {n}", limit)

    small, large = [], []
    for i in range(1, root + 1):
        if n % i == 0:
            small.append(i)
            if i * i != n:
                large.append(n // i)
    return small + large[::-1]


def is_prime(n):
    return bool(sp.isprime(as_integer(n)))


def factorial(n):
    """Exact ``n!`` for a non-negative integer ``n``."""
    try:
        n = as_integer(n)
    except DomainError as exc:
        raise InvalidArgument(f"Factorial needs a non-negative integer, got {n}") from exc
    if n < 0:
        raise InvalidArgument(f"Factorial needs a non-negative integer, got {n}")
    return int(_scipy_factorial(n, exact=True))
