from unittest import TestCase

from .scalar_tst_functions import f, f_shift, F_ROOT, CountingFunction


# ======================================================================

class TestSecant(TestCase):
    def test_secant(self):
        from pyonevar.numeric.solve import secant, TraceRecorder

        # Check normal operation.
        func = CountingFunction(f)
        rec = TraceRecorder()
        x, res = secant(func, 1.0, 2.0, full_output=True, verbose=rec)
        self.assertAlmostEqual(x, F_ROOT, places=12)
        self.assertEqual(res.function_calls, func.calls)
        self.assertEqual(rec[0].iteration, 2)
        self.assertEqual(rec[-1].iteration, res.iterations)

        # Convergence is measured against the older point p0.
        self.assertLess(abs(rec[-1]['p'] - rec[-1]['p0']), 1e-6)
        for r in rec[:-1]:
            self.assertGreaterEqual(abs(r['p'] - r['p0']), 1e-6)

        # Window shifts by one point each iteration.
        for r0, r1 in zip(rec, rec[1:]):
            self.assertEqual(r1['p0'], r0['p1'])
            self.assertEqual(r1['p1'], r0['p'])

        # No sign condition is needed on the starting points.
        x = secant(f, 1.0, 1.1)
        self.assertAlmostEqual(x, F_ROOT, places=9)

        # Extra arguments.
        x = secant(f_shift, 1.0, 2.0, args=(5.0,))
        self.assertAlmostEqual(x, 5.0 ** (1 / 3), places=9)

    def test_secant_failures(self):
        from pyonevar.numeric.solve import (secant, ConvergenceError,
                                            SingularDerivativeError)

        with self.assertRaises(ConvergenceError) as cm:
            secant(f, 1.0, 2.0, maxits=3)
        self.assertEqual(cm.exception.maxits, 3)

        # Equal function values give a flat secant line.
        with self.assertRaises(SingularDerivativeError) as cm:
            secant(lambda x: x ** 2 - 4, -1.0, 1.0)
        self.assertEqual(cm.exception.flag, 3)
        self.assertEqual(cm.exception.iterations, 0)

    def test_secant_collapsed(self):
        from pyonevar.numeric.solve import secant

        # Starting exactly on the root with p0 == p1.
        self.assertEqual(secant(lambda x: x - 2.0, 2.0, 2.0), 2.0)

    def test_secant_collapsed_not_root(self):
        from pyonevar.numeric.solve import secant, SingularDerivativeError

        # Coincident starting points away from a root are not a solution.
        with self.assertRaises(SingularDerivativeError) as cm:
            secant(lambda x: x ** 2 - 2, 1.0, 1.0, full_output=True)
        self.assertEqual(cm.exception.p0, 1.0)
        self.assertEqual(cm.exception.p1, 1.0)
        self.assertEqual(cm.exception.iterations, 0)
