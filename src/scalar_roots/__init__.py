"""
`scalar_roots`: root-finding and fixed-point iteration for continuous scalar functions.
"""

from scalar_roots.root_search import binary, fixed_point
from scalar_roots.functional import x_minus, identity, frac, newton_raphson
from scalar_roots.wrappers import find_root

__all__ = [
    "binary",
    "fixed_point",
    "x_minus",
    "identity",
    "frac",
    "newton_raphson",
    "find_root",
]
