import math
from unittest import TestCase


def f(x):
    return x ** 3 + 4 * x ** 2 - 10


def g(x):
    return 0.5 * math.sqrt(10 - x ** 3)


class TestSolveScenarios(TestCase):
    def test_bisect_root(self):
        from pyonevar.numeric.solve import bisect_root

        x = bisect_root(f, 1, 2, tol=1e-4)
        self.assertAlmostEqual(x, 1.3652, places=4)

    def test_newton_raphson(self):
        from pyonevar.numeric.solve import newton_raphson

        x = newton_raphson(f, 1.5)
        self.assertAlmostEqual(x, 1.365230013, places=9)

    def test_bracket_failure(self):
        from pyonevar.numeric.solve import bisect_root, BracketError

        calls = []

        def positive(x):
            calls.append(x)
            return x ** 2 + 0.5

        with self.assertRaises(BracketError):
            bisect_root(positive, 0, 1)
        self.assertEqual(calls, [0, 1])

    def test_fixed_point(self):
        from pyonevar.numeric.solve import fixed_point, newton_raphson

        x_fp = fixed_point(g, 1.5)
        x_nr = newton_raphson(f, 1.5)
        self.assertAlmostEqual(x_fp, x_nr, delta=1e-5)

    def test_all_methods_agree(self):
        from pyonevar.numeric.solve import (bisect_root, false_position,
                                            fixed_point, newton_raphson,
                                            secant, steffensen)

        results = [bisect_root(f, 1.0, 2.0),
                   false_position(f, 1.0, 2.0),
                   fixed_point(g, 1.5),
                   newton_raphson(f, 1.5),
                   secant(f, 1.0, 2.0),
                   steffensen(g, 1.5)]
        for x in results:
            self.assertAlmostEqual(x, 1.365230013, delta=1e-5)

        # No state is kept between calls.
        self.assertEqual(results[0], bisect_root(f, 1.0, 2.0))
        self.assertEqual(results[-1], steffensen(g, 1.5))
