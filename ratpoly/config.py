"""Computation limits and display defaults for ratpoly."""

from typing import Final

# Variable name used when a polynomial carries no label
DEFAULT_VARIABLE: Final[str] = "x"

# Trial divisions allowed in one divisors() call (covers |n| up to ~10^14)
MAX_TRIAL_DIVISIONS: Final[int] = 10_000_000

# Candidates +-p/q tested in one rational_roots() call
MAX_ROOT_CANDIDATES: Final[int] = 200_000

# Synthetic divisions allowed in one root_multiplicities() call
MAX_MULTIPLICITY_STEPS: Final[int] = 10_000
