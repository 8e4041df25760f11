"""
Convenience functions for composing functionals and running the root-finders.
"""
import logging
from typing import Optional, Union, List, Dict, Any, Tuple

from scalar_roots.types import ContinuousFunction, Domain
from scalar_roots.functional import (
    get_functional,
    get_functional_derivative,
    x_minus,
    newton_raphson,
)
from scalar_roots.root_search import binary, fixed_point, TOL, MAX_ITERS
from scalar_roots.sample_functions import get_sample

# Constants #

# search methods
BINARY = "binary"
FIXED_POINT = "fixed_point"
NEWTON = "newton"

METHODS = [BINARY, FIXED_POINT, NEWTON]

# defaults; bracket the root of `trig`.
DOMAIN: Domain = (-3.0, -2.0)
INITIAL_VAL: float = -3.0

FunctionalConfig = Union[str, Dict[str, Any]]


# ========================
# ==== Logging Helper ====
# ========================


def _get_logger(
    name: str, verbose: bool = False, debug: bool = False, log_file: str = None
) -> logging.Logger:
    """Construct a logging.Logger instance with an appropriate configuration.
    :param name: name for the Logger instance.
    :param verbose: (optional) whether or not the logger should print verbosely (ie. at the INFO level).
        Defaults to False.
    :param debug: (optional) whether or not the logger should print in debug mode (ie. at the DEBUG level).
        Defaults to False.
    :param log_file: (optional) path to a file where the log should be stored. The log is printed to stderr when 'None'.
    :returns: instance of logging.Logger.
    """

    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logging.basicConfig(level=level, filename=log_file)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger


# ===================
# ==== Root Find ====
# ===================


def find_root(
    func: Union[str, ContinuousFunction],
    method: str = BINARY,
    deriv: Optional[ContinuousFunction] = None,
    transforms: Optional[List[FunctionalConfig]] = None,
    domain: Domain = DOMAIN,
    initial_val: float = INITIAL_VAL,
    trunc_err: float = TOL,
    max_iters: Optional[int] = MAX_ITERS,
    verbose: bool = False,
    debug: bool = False,
    logger: Optional[logging.Logger] = None,
    log_file: Optional[str] = None,
) -> Tuple[Optional[float], Dict[str, Any]]:
    """Compose a chain of functionals and search the result for a root or fixed point.
    :param func: a continuous function or the name of a sample function.
        Valid sample names are: 'identity', 'polynom', 'trig'.
    :param method: (optional) the search method to use. Defaults to bisection.
        Valid options are: 'binary': bisection over 'domain'.
                           'fixed_point': fixed-point iteration starting from 'initial_val'.
                           'newton': fixed-point iteration on x - f(x) / f'(x), where f is the
                                transformed function. Requires a derivative.
    :param deriv: (optional) the derivative of 'func'. Taken from the sample library when
        'func' is a sample name. The derivative is carried through
        'transforms' so that 'newton' uses the derivative of the transformed function.
    :param transforms: (optional) a list of functionals applied to 'func' in order. Each entry is
        either a functional name or a configuration dictionary, e.g. {"name": "frac", "k": 1.0}.
    :param domain: (optional) the bisection interval.
    :param initial_val: (optional) the starting point for fixed-point iteration.
    :param trunc_err: (optional) the acceptable truncation error.
    :param max_iters: (optional) the maximum number of iterations. Bisection is unbounded when
        'None'; the fixed-point methods require an integer.
    :param verbose: (optional) whether or not to log progress.
    :param debug: (optional) whether or not to log the iterates.
    :param logger: (optional) a logging instance to use.
    :param log_file: (optional) a file path where log information should be stored.
    :returns: (root, exit_status). For fixed-point methods the iterates are stored in
        exit_status["trace"].
    """

    if method not in METHODS:
        raise ValueError(
            f"Search method {method} not recognized! Valid methods are {METHODS}."
        )

    # Initialize Logger #
    if logger is None:
        logger = _get_logger("scalar_roots", verbose, debug, log_file)

    if isinstance(func, str):
        logger.info(f"Using sample function '{func}'.")
        func, sample_deriv = get_sample(func)
        if deriv is None:
            deriv = sample_deriv

    # Compose Functionals #
    for config in transforms or []:
        if isinstance(config, str):
            config = {"name": config}
        logger.info(f"Applying functional '{config.get('name')}'.")
        func, deriv = (
            get_functional(config, func, deriv),
            get_functional_derivative(config, deriv),
        )

    # Search #
    if method == BINARY:
        logger.info(f"Bisecting over {domain} with tolerance {trunc_err}.")
        root, exit_status = binary(func, domain, trunc_err, max_iters)
    else:
        if method == NEWTON:
            if deriv is None:
                raise ValueError("Newton's method requires a derivative!")
            func = x_minus(newton_raphson(func, deriv))

        logger.info(
            f"Iterating from {initial_val} with tolerance {trunc_err} and at most {max_iters} iterations."
        )
        root, trace, exit_status = fixed_point(func, initial_val, trunc_err, max_iters)
        exit_status["trace"] = trace
        logger.debug(f"Iterates: {trace}")

    if exit_status["success"]:
        logger.info(f"Found {root} after {exit_status['n_iters']} iterations.")
    else:
        logger.warning(exit_status["message"])

    return root, exit_status
