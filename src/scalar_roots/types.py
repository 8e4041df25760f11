"""
Types shared by the root-finders and functionals.
"""
from typing import Callable, Tuple

# a deterministic map from floats to floats.
ContinuousFunction = Callable[[float], float]

# (start, end) of a bisection interval.
Domain = Tuple[float, float]
