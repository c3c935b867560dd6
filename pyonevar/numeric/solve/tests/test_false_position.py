from unittest import TestCase

from .scalar_tst_functions import f, f_shift, F_ROOT, CountingFunction


# ======================================================================


class TestFalsePosition(TestCase):
    def test_false_position(self):
        from pyonevar.numeric.solve import false_position, TraceRecorder

        # Check normal operation.
        rec = TraceRecorder()
        x, res = false_position(f, 1.0, 2.0, full_output=True, verbose=rec)
        self.assertAlmostEqual(x, F_ROOT, delta=1e-5)
        self.assertTrue(1.0 <= x <= 2.0)
        self.assertEqual(res.method, 'false_position')

        # Stopping criterion is against the most recent point.
        self.assertLess(abs(rec[-1]['p'] - rec[-1]['p1']), 1e-6)
        for r in rec[:-1]:
            self.assertGreaterEqual(abs(r['p'] - r['p1']), 1e-6)

        # Numbering starts at 2, counting the two starting points.
        self.assertEqual(rec[0].iteration, 2)
        self.assertEqual(rec[-1].iteration, res.iterations)

        # Every retained pair brackets the root.
        for r in rec:
            self.assertLess(r['q0'] * r['q1'], 0)
            self.assertTrue(min(r['p0'], r['p1']) <= F_ROOT
                            <= max(r['p0'], r['p1']))

        # Extra arguments.
        x = false_position(f_shift, 0.0, 4.0, args=(27.0,), tol=1e-10)
        self.assertAlmostEqual(x, 3.0, places=8)

    def test_false_position_stalling(self):
        from pyonevar.numeric.solve import false_position, TraceRecorder

        # f is convex on [1, 2] so the right end point is never replaced.
        rec = TraceRecorder()
        false_position(f, 1.0, 2.0, verbose=rec)
        self.assertGreater(len(rec), 2)
        self.assertTrue(all(r['p0'] == 2.0 for r in rec[1:]))

    def test_false_position_failures(self):
        from pyonevar.numeric.solve import (false_position, BracketError,
                                            ConvergenceError)

        func = CountingFunction(lambda x: x ** 2 + 1)
        with self.assertRaises(BracketError):
            false_position(func, -1.0, 1.0)
        self.assertEqual(func.calls, 2)
        with self.assertRaises(BracketError):
            false_position(lambda x: -1e-200, 0.0, 1.0)

        with self.assertRaises(ConvergenceError) as cm:
            false_position(f, 1.0, 2.0, maxits=5, tol=1e-15)
        self.assertEqual(cm.exception.maxits, 5)

        # Exact zero at a starting point.
        self.assertEqual(false_position(lambda x: x - 2.0, 1.0, 2.0), 2.0)
