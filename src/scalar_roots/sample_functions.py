"""
Sample functions and their derivatives for exercising the root-finders.

    - `identity`: returns the input. Has a root at x = 0.
    - `polynom`: a cubic polynomial. Has roots at x = 0.5 and x = 4.
    - `trig`: the sum of a linear polynomial and a sinusoid. Has a root at x = -2.88...
"""
from typing import Dict, Tuple

import numpy as np

from scalar_roots.types import ContinuousFunction

# functions


def identity(x: float) -> float:
    return x


def polynom(x: float) -> float:
    return x ** 3 - 8.5 * x ** 2 + 20.0 * x - 8.0


def trig(x: float) -> float:
    return 2.0 * x - 3.0 * np.sin(x) + 5.0


# derivatives


def d_identity(x: float) -> float:
    return 1.0


def d_polynom(x: float) -> float:
    return 3.0 * x ** 2 - 17.0 * x + 20.0


def d_trig(x: float) -> float:
    return 2.0 - 3.0 * np.cos(x)


# index

SAMPLES: Dict[str, Tuple[ContinuousFunction, ContinuousFunction]] = {
    "identity": (identity, d_identity),
    "polynom": (polynom, d_polynom),
    "trig": (trig, d_trig),
}


def get_sample(name: str) -> Tuple[ContinuousFunction, ContinuousFunction]:
    """Look up a sample function and its derivative by name.
    :param name: one of 'identity', 'polynom' or 'trig'.
    :returns: (function, derivative).
    """
    if name not in SAMPLES:
        raise ValueError(
            f"Sample function {name} not recognized! Valid options are {list(SAMPLES)}."
        )

    return SAMPLES[name]
