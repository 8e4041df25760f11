"""
A collection of 'functionals' for use in fixed-point iteration.

    - `x_minus`: id - F.
    - `identity`: F.
    - `frac`: F / (2 + k) unless k = -2, in which case the constant function 1 is returned.
        x -> x - 1 has no fixed point, so this is an acceptable degenerate case.
    - `newton_raphson`: F / F'.
"""
from typing import Dict, Any, Optional

from scalar_roots.types import ContinuousFunction

# names

X_MINUS = "x_minus"
IDENTITY = "identity"
FRAC = "frac"
NEWTON_RAPHSON = "newton_raphson"

FUNCTIONALS = [X_MINUS, IDENTITY, FRAC, NEWTON_RAPHSON]


# functionals


def x_minus(func: ContinuousFunction) -> ContinuousFunction:
    """Apply the transform f(x) -> x - f(x).
    :param func: a continuous function.
    :returns: the function x - func(x).
    """

    def g(x: float) -> float:
        return x - func(x)

    return g


def identity(func: ContinuousFunction) -> ContinuousFunction:
    """Apply the identity transform to a function.
    :param func: a continuous function.
    :returns: a function which agrees with 'func' everywhere.
    """

    def g(x: float) -> float:
        return func(x)

    return g


def frac(func: ContinuousFunction, k: float) -> ContinuousFunction:
    """Divide a function by (2 + k).
    :param func: a continuous function.
    :param k: shift of the divisor.
    :returns: the function func(x) / (2 + k), or the constant function 1 when k = -2.
    """
    if k == -2.0:
        return lambda x: 1.0

    divisor = 2.0 + k

    def g(x: float) -> float:
        return func(x) / divisor

    return g


def newton_raphson(
    func: ContinuousFunction, deriv: ContinuousFunction
) -> ContinuousFunction:
    """Apply the Newton-Raphson transform to a function.
    Compose with `x_minus` to obtain the Newton-Raphson update x - f(x) / f'(x).
    :param func: a continuous function.
    :param deriv: the derivative of 'func'.
    :returns: func(x) / deriv(x), or 1 at points where the derivative vanishes.
    """

    def g(x: float) -> float:
        d = deriv(x)
        if d == 0.0:
            return 1.0

        return func(x) / d

    return g


# index


def get_functional(
    config: Dict[str, Any],
    func: ContinuousFunction,
    deriv: Optional[ContinuousFunction] = None,
) -> ContinuousFunction:
    """Apply a functional by name using the passed configuration parameters.
    :param config: configuration object specifying the functional.
    :param func: the function to transform.
    :param deriv: (optional) the derivative of 'func'. Required by 'newton_raphson'.
    :returns: the transformed function.
    """
    name = config.get("name", None)

    if name is None:
        raise ValueError("Functional must have name!")
    elif name == X_MINUS:
        return x_minus(func)
    elif name == IDENTITY:
        return identity(func)
    elif name == FRAC:
        return frac(func, config.get("k", 0.0))
    elif name == NEWTON_RAPHSON:
        if deriv is None:
            raise ValueError("The Newton-Raphson functional requires a derivative!")
        return newton_raphson(func, deriv)
    else:
        raise ValueError(f"Functional {name} not recognized!")


def get_functional_derivative(
    config: Dict[str, Any],
    deriv: Optional[ContinuousFunction] = None,
) -> Optional[ContinuousFunction]:
    """Compute the derivative of a functional's output from the derivative of its input.
    :param config: configuration object specifying the functional.
    :param deriv: (optional) the derivative of the function being transformed.
    :returns: the derivative of the transformed function, or 'None' when it cannot be
        formed from 'deriv' alone. The Newton-Raphson step needs a second derivative.
    """
    name = config.get("name", None)

    if deriv is None or name == NEWTON_RAPHSON:
        return None
    elif name == X_MINUS:
        return lambda x: 1.0 - deriv(x)
    elif name == IDENTITY:
        return identity(deriv)
    elif name == FRAC:
        k = config.get("k", 0.0)
        if k == -2.0:
            return lambda x: 0.0
        return frac(deriv, k)
    else:
        raise ValueError(f"Functional {name} not recognized!")
