from unittest import TestCase


# ======================================================================

class TestSolverError(TestCase):
    def test_solver_error(self):
        from pyonevar.numeric.solve import SolverError

        err = SolverError("Failed:", flag=7, details="Some detail.",
                          x=1.5, steps=3)
        self.assertEqual(err.flag, 7)
        self.assertEqual(err.x, 1.5)
        s = str(err)
        self.assertTrue(s.startswith("Failed:"))
        self.assertIn("details -> Some detail.", s)
        self.assertIn("x -> 1.5", s)
        self.assertIn("steps -> 3", s)

    def test_hierarchy(self):
        from pyonevar.numeric.solve import (
            SolverError, BracketError, ConvergenceError,
            DegenerateAccelerationError, SingularDerivativeError)

        flags = {}
        for cls in (ConvergenceError, BracketError,
                    SingularDerivativeError, DegenerateAccelerationError):
            self.assertTrue(issubclass(cls, SolverError))
            self.assertTrue(issubclass(cls, RuntimeError))
            flags[cls] = cls("msg").flag
            self.assertNotEqual(flags[cls], 0)

        self.assertEqual(len(set(flags.values())), 4)
        self.assertTrue(issubclass(BracketError, ValueError))
        self.assertEqual(ConvergenceError("msg", flag=9).flag, 9)

    def test_convergence_error_details(self):
        from pyonevar.numeric.solve import bisect_root, ConvergenceError

        with self.assertRaises(ConvergenceError) as cm:
            bisect_root(lambda x: x - 0.1, 0.0, 1.0, maxits=3, tol=1e-12)
        err = cm.exception
        self.assertEqual(err.method, 'bisect_root')
        self.assertEqual(err.iterations, 3)
        self.assertEqual(err.fevals, 5)
        self.assertEqual(err.x, 0.125)
        self.assertIn("maxits -> 3", str(err))
