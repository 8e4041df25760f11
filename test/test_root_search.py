"""
Tests for root-finding with bisection and fixed-point iteration.
"""

import unittest

import numpy as np
from parameterized import parameterized, parameterized_class  # type: ignore
from scipy.optimize import brentq  # type: ignore

from scalar_roots import sample_functions
from scalar_roots.root_search import (
    binary,
    fixed_point,
    CONVERGED,
    NO_SIGN_CHANGE,
    DID_NOT_CONVERGE,
    MESSAGES,
)


@parameterized_class(
    [
        {"name": "identity", "domain": (-1.0, 2.0)},
        {"name": "polynom", "domain": (0.0, 2.0)},
        {"name": "trig", "domain": (-3.0, -2.0)},
    ]
)
class TestBracketedBisection(unittest.TestCase):
    """Test bisection on functions which change sign over the domain."""

    name: str
    domain: tuple

    def setUp(self):
        self.func, _ = sample_functions.get_sample(self.name)
        self.root = brentq(self.func, *self.domain, xtol=1e-14)

    def test_within_tolerance(self):
        """Test that bisection finds the root to within the truncation error."""

        for trunc_err in [1e-1, 1e-3, 1e-8]:
            root, exit_status = binary(self.func, self.domain, trunc_err)

            self.assertTrue(exit_status["success"], "Bisection reported failure!")
            self.assertEqual(exit_status["status"], CONVERGED)
            self.assertTrue(
                abs(root - self.root) <= trunc_err,
                "Bisection failed to find root within given tolerance.",
            )
            self.assertTrue(
                min(self.domain) <= root <= max(self.domain),
                "Bisection left the search interval.",
            )

    def test_unbounded(self):
        """Test bisection without an iteration cap."""

        root, exit_status = binary(self.func, self.domain, 1e-6, max_iters=None)

        self.assertTrue(exit_status["success"], "Bisection reported failure!")
        self.assertTrue(abs(root - self.root) <= 1e-6)


class TestBinary(unittest.TestCase):
    """Test edge cases of bisection."""

    def test_identity(self):
        """Test bisection on the identity function with a coarse tolerance."""

        root, exit_status = binary(sample_functions.identity, (-1.0, 2.0), 0.1)

        self.assertTrue(exit_status["success"])
        self.assertEqual(0.0, round(root, 1))

    def test_trig(self):
        """Test bisection on a sinusoid with a coarse tolerance."""

        root, exit_status = binary(sample_functions.trig, (-3.0, -2.0), 0.1)

        self.assertTrue(exit_status["success"])
        self.assertEqual(-2.9, round(root, 1))

    def test_no_sign_change(self):
        """Test that bisection fails when the end points have the same sign."""

        root, exit_status = binary(sample_functions.identity, (1.0, 2.0), 0.1)

        self.assertIsNone(root)
        self.assertFalse(exit_status["success"])
        self.assertEqual(exit_status["status"], NO_SIGN_CHANGE)
        self.assertEqual(exit_status["message"], "Error: no sign change at endpoints!")
        self.assertEqual(exit_status["n_iters"], 0)

    def test_exact_end_points(self):
        """Test that exact roots at the end points are returned without bisecting."""

        root, exit_status = binary(sample_functions.identity, (0.0, 1.0), 10.0)
        self.assertEqual(root, 0.0)
        self.assertEqual(exit_status["n_iters"], 0)

        root, exit_status = binary(sample_functions.identity, (-1.0, 0.0), 10.0)
        self.assertEqual(root, 0.0)
        self.assertEqual(exit_status["n_iters"], 0)

        # the start point takes precedence.
        root, exit_status = binary(lambda x: 0.0, (3.0, 4.0), 0.1)
        self.assertEqual(root, 3.0)

    def test_exact_midpoint(self):
        """Test that an exact root at a midpoint stops the search."""

        root, exit_status = binary(sample_functions.identity, (-1.0, 1.0), 1e-12)

        self.assertTrue(exit_status["success"])
        self.assertEqual(root, 0.0)
        self.assertEqual(exit_status["n_iters"], 1)

    def test_iteration_cap(self):
        """Test that bisection stops after the maximum number of iterations."""

        root, exit_status = binary(
            sample_functions.identity, (-1.0, 2.0), 1e-12, max_iters=3
        )

        self.assertFalse(exit_status["success"])
        self.assertEqual(exit_status["status"], DID_NOT_CONVERGE)
        self.assertEqual(exit_status["n_iters"], 3)
        self.assertTrue(-1.0 <= root <= 2.0)

    @parameterized.expand([(0.0,), (-1.0,)])
    def test_invalid_tolerance(self, trunc_err):
        with self.assertRaises(ValueError):
            binary(sample_functions.identity, (-1.0, 2.0), trunc_err)

    def test_invalid_max_iters(self):
        with self.assertRaises(ValueError):
            binary(sample_functions.identity, (-1.0, 2.0), 0.1, max_iters=0)

        with self.assertRaises(ValueError):
            binary(sample_functions.identity, (-1.0, 2.0), 0.1, max_iters=2.5)

    def test_undefined_end_points(self):
        """Test that bisection refuses end points where the function is NaN."""

        def func(x):
            return float("nan") if x < 0 else x - 1.0

        for domain in [(-1.0, 2.0), (2.0, -1.0)]:
            root, exit_status = binary(func, domain, 0.1)

            self.assertIsNone(root)
            self.assertEqual(exit_status["status"], NO_SIGN_CHANGE)


class TestFixedPoint(unittest.TestCase):
    """Test fixed-point iteration."""

    def test_cos(self):
        """Test fixed-point iteration on cos, which is a contraction near its fixed point."""

        x, trace, exit_status = fixed_point(np.cos, 2.5, 0.1, 10)

        self.assertTrue(exit_status["success"], "Fixed-point iteration reported failure!")
        self.assertEqual(0.8, round(x, 1))

        # the converged value is returned separately from the trace.
        self.assertEqual(len(trace), 3)
        self.assertEqual(trace[0], 2.5)
        self.assertEqual(exit_status["n_iters"], len(trace))
        self.assertTrue(np.allclose(trace[1:], np.cos(trace[:-1])))
        self.assertEqual(x, np.cos(trace[-1]))

    def test_tight_tolerance(self):
        """Test convergence to the fixed point of cos at a tight tolerance."""

        x, trace, exit_status = fixed_point(np.cos, 1.0, 1e-10, 1000)

        self.assertTrue(exit_status["success"])
        self.assertTrue(abs(np.cos(x) - x) <= 1e-9)
        self.assertTrue(len(trace) <= 999)

    def test_immediate_convergence(self):
        """Test a starting point which is already a fixed point."""

        x, trace, exit_status = fixed_point(lambda x: x, 3.0, 0.1, 10)

        self.assertTrue(exit_status["success"])
        self.assertEqual(x, 3.0)
        self.assertEqual(trace, [3.0])

    @parameterized.expand([(1,), (5,), (20,)])
    def test_divergence(self, max_iters):
        """Test that a function without a fixed point returns the full trace."""

        x, trace, exit_status = fixed_point(lambda x: x + 1, 0.0, 0.1, max_iters)

        self.assertIsNone(x)
        self.assertFalse(exit_status["success"])
        self.assertEqual(exit_status["status"], DID_NOT_CONVERGE)
        self.assertEqual(exit_status["message"], MESSAGES[DID_NOT_CONVERGE])
        self.assertEqual(len(trace), max_iters)
        self.assertEqual(trace, [float(i) for i in range(max_iters)])

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            fixed_point(np.cos, 1.0, 0.0, 10)

        with self.assertRaises(ValueError):
            fixed_point(np.cos, 1.0, 0.1, 0)

        for max_iters in [None, 2.5, "10"]:
            with self.assertRaises(ValueError):
                fixed_point(np.cos, 1.0, 0.1, max_iters)


if __name__ == "__main__":
    unittest.main()
