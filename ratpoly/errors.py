"""Error kinds raised by ratpoly.

Every error derives from RatPolyError. Where a builtin exception already
names the failure (ValueError, ZeroDivisionError) it is mixed in so callers
catching the builtin keep working.
"""


class RatPolyError(Exception):
    pass


# Empty coefficient lists, non-integer orders, floats where exact values are needed
class InvalidArgument(RatPolyError, ValueError):
    pass


# Zero polynomial divisors, poles, non-unit modular inverses
class DivisionByZero(RatPolyError, ZeroDivisionError):
    pass


# Integer-only operations applied to non-integer coefficients
class DomainError(RatPolyError, ValueError):
    pass


# Denominator factors without rational roots
class UnsupportedDecomposition(RatPolyError):
    pass


class ComputationLimitExceeded(RatPolyError):
    def __init__(self, what, limit):
        super().__init__(f"{what} exceeded the limit of {limit}")
        self.what = what
        self.limit = limit
