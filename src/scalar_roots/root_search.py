"""
Algorithms for root-finding.

    - `binary`: binary search, a.k.a. interval bisection.
    - `fixed_point`: fixed-point iteration.
"""
from typing import Dict, Any, Optional, Tuple, List

import numpy as np

from scalar_roots.types import ContinuousFunction, Domain

# constants

TOL = 1e-6
MAX_ITERS = 1000

# exit statuses

CONVERGED = "converged"
NO_SIGN_CHANGE = "no_sign_change"
DID_NOT_CONVERGE = "did_not_converge"

MESSAGES = {
    CONVERGED: "Converged.",
    NO_SIGN_CHANGE: "Error: no sign change at endpoints!",
    DID_NOT_CONVERGE: "Error: failed to converge within the maximum number of iterations!",
}


# root-finders


def binary(
    func: ContinuousFunction,
    domain: Domain,
    trunc_err: float = TOL,
    max_iters: Optional[int] = MAX_ITERS,
) -> Tuple[Optional[float], Dict[str, Any]]:
    """Find a root of a continuous function using binary search.
    :param func: a continuous function with a sign change over 'domain'.
    :param domain: the start and end points of the search interval. 'func' must be
        computable over the entire domain, including the end points.
    :param trunc_err: (optional) the acceptable truncation error for the search, e.g.
        'trunc_err=1' finds the root +-1.
    :param max_iters: (optional) the maximum number of bisections to perform.
        Bisection is unbounded when 'None'.
    :returns: (root, exit_status). The root is 'None' when there is no sign change
        at the end points, including when 'func' is NaN at either end point.
    """
    _check_tolerance(trunc_err)
    if max_iters is not None:
        _check_max_iters(max_iters)

    # only the signs of the function values determine the search.
    def func_sgn(x: float) -> float:
        return np.sign(func(x))

    start, end = domain
    start_val, end_val = func_sgn(start), func_sgn(end)

    if start_val == 0.0:
        return float(start), _exit_status(CONVERGED, 0)
    if end_val == 0.0:
        return float(end), _exit_status(CONVERGED, 0)
    if np.isnan(start_val) or np.isnan(end_val) or start_val * end_val > 0.0:
        return None, _exit_status(NO_SIGN_CHANGE, 0)

    i = 0
    while True:
        i += 1
        midpoint = (end + start) / 2.0
        test_val = func_sgn(midpoint)

        if test_val == 0.0 or (end - start) < trunc_err:
            return midpoint, _exit_status(CONVERGED, i)

        if max_iters is not None and i >= max_iters:
            return midpoint, _exit_status(DID_NOT_CONVERGE, i)

        if test_val * start_val > 0.0:
            start = midpoint
            start_val = test_val
        else:
            end = midpoint


def fixed_point(
    func: ContinuousFunction,
    initial_val: float,
    trunc_err: float = TOL,
    max_iters: int = MAX_ITERS,
) -> Tuple[Optional[float], List[float], Dict[str, Any]]:
    """Find the fixed point of a function where one exists.
    :param func: a continuous function with a fixed point, e.g. a contraction mapping.
    :param initial_val: initial guess for the location of the fixed point.
    :param trunc_err: (optional) the acceptable truncation error for the search, e.g.
        'trunc_err=1' finds the fixed point +-1.
    :param max_iters: (optional) the maximum number of iterations to run before declaring
        that there is no fixed point. This depends on both the rate of convergence and the
        truncation error.
    :returns: (fixed_point, trace, exit_status). The trace holds every iterate that started
        an iteration; the converged value is not included. If the method fails to converge,
        the fixed point is 'None' and the trace also holds the last iterate.
    """
    _check_tolerance(trunc_err)
    _check_max_iters(max_iters)

    trace: List[float] = []
    current_val = initial_val

    for i in range(1, max_iters):
        trace.append(current_val)
        next_val = func(current_val)

        if abs(next_val - current_val) < trunc_err:
            return next_val, trace, _exit_status(CONVERGED, i)

        current_val = next_val

    trace.append(current_val)

    return None, trace, _exit_status(DID_NOT_CONVERGE, max_iters - 1)


# helpers


def _exit_status(status: str, n_iters: int) -> Dict[str, Any]:
    return {
        "success": status == CONVERGED,
        "status": status,
        "message": MESSAGES[status],
        "n_iters": n_iters,
    }


def _check_tolerance(trunc_err: float):
    if not trunc_err > 0:
        raise ValueError(f"Truncation error must be positive, got {trunc_err}.")


def _check_max_iters(max_iters: int):
    if not isinstance(max_iters, (int, np.integer)) or max_iters < 1:
        raise ValueError(f"Maximum iterations must be at least 1, got {max_iters}.")
