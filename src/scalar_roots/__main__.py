"""
Command-line driver: search a sample function for a root and print the result.
"""
import argparse
import sys
from typing import List, Optional

from scalar_roots.functional import FUNCTIONALS, FRAC
from scalar_roots.root_search import TOL, MAX_ITERS
from scalar_roots.sample_functions import SAMPLES
from scalar_roots.wrappers import find_root, METHODS, BINARY, DOMAIN, INITIAL_VAL


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="scalar_roots",
        description="Find a root or fixed point of a sample function.",
    )
    parser.add_argument(
        "--function", choices=list(SAMPLES), default="trig", help="Sample function."
    )
    parser.add_argument(
        "--method", choices=METHODS, default=BINARY, help="Search method."
    )
    parser.add_argument(
        "--transform",
        action="append",
        choices=FUNCTIONALS,
        default=[],
        help="Functional to apply before searching. May be repeated.",
    )
    parser.add_argument(
        "--k", type=float, default=0.0, help="Divisor shift for the 'frac' functional."
    )
    parser.add_argument(
        "--domain",
        type=float,
        nargs=2,
        default=list(DOMAIN),
        metavar=("START", "END"),
        help="Bisection interval.",
    )
    parser.add_argument(
        "--initial-val",
        type=float,
        default=INITIAL_VAL,
        help="Starting point for fixed-point iteration.",
    )
    parser.add_argument(
        "--trunc-err", type=float, default=TOL, help="Acceptable truncation error."
    )
    parser.add_argument(
        "--max-iters", type=int, default=MAX_ITERS, help="Maximum number of iterations."
    )
    parser.add_argument(
        "--digits", type=int, default=4, help="Digits to round the result to."
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress.")
    parser.add_argument("--log-file", type=str, default=None, help="Log file path.")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    transforms = [
        {"name": name, "k": args.k} if name == FRAC else {"name": name}
        for name in args.transform
    ]

    root, exit_status = find_root(
        args.function,
        method=args.method,
        transforms=transforms,
        domain=tuple(args.domain),
        initial_val=args.initial_val,
        trunc_err=args.trunc_err,
        max_iters=args.max_iters,
        verbose=args.verbose,
        log_file=args.log_file,
    )

    if not exit_status["success"]:
        print(exit_status["message"])
        if "trace" in exit_status:
            print(f"iterations: {len(exit_status['trace'])}")
        else:
            print(f"iterations: {exit_status['n_iters']}")
        return 1

    print(f"root: {round(float(root), args.digits)}")
    print(f"iterations: {exit_status['n_iters']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
