from __future__ import annotations

from collections.abc import Callable

from ._common import (DEFAULT_MAXITS, DEFAULT_TOL, check_options,
                      convergence_error, results_select)
from .exception import SingularDerivativeError
from .trace import VerboseArg, make_reporter

# Written by the pyonevar developers, October 2026.


# ======================================================================

def secant(func: Callable[..., float], p0: float, p1: float, *,
           tol: float = DEFAULT_TOL, maxits: int = DEFAULT_MAXITS,
           args=(), full_output: bool = False,
           verbose: VerboseArg = False):
    r"""
    Find a zero of `func` using the secant method.  The derivative in
    Newton's method is replaced by the slope of the line through the
    two most recent points :math:`(p_0, q_0)` and :math:`(p_1, q_1)`:

    .. math:: p = p_1 - q_1 \frac{p_1 - p_0}{q_1 - q_0}

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    p0, p1 : float
        Two starting estimates.  No sign condition is required.
    tol : float, default = 1e-6
        Stop when :math:`|p - p_0| < tol`.  Note this compares the new
        point with the *older* of the two retained points.
    maxits : int, default = 1,000,000
        Iteration limit.  The two starting points count as iterations 0
        and 1, so the first new point is iteration 2.
    args : optional
        Extra arguments passed to `func`.
    full_output : bool, default = False
        If True, return ``(x, RootResult)`` instead of just `x`.
    verbose : bool or Callable[[IterationRecord], None], default = False
        Trace sink receiving `p0`, `p1`, `q0`, `q1` and `p` for each
        iteration.  If True, print progress statements.

    Returns
    -------
    p : float
        Estimate of the root.

    Raises
    ------
    SingularDerivativeError
        If :math:`q_1 = q_0`, so the secant line is flat and has no
        root.  The only exception is when the two points have collapsed
        together onto an exact root (:math:`p_1 = p_0`, :math:`q_1 = 0`),
        which is returned as the solution.
    ConvergenceError
        If `maxits` is reached before a solution is found.

    Examples
    --------
    >>> f = lambda x: x**3 + 4 * x**2 - 10
    >>> round(secant(f, 1.0, 2.0), 9)
    1.365230013
    """
    maxits = check_options(tol, maxits)
    report = make_reporter('secant', verbose)

    q0, q1 = func(p0, *args), func(p1, *args)
    fevals = 2

    p = p1
    for it in range(2, maxits + 1):
        if q1 == q0:
            # Reached a level state: f(p0) = f(p1) -> df/dp = 0.  Only a
            # solution if the points have collapsed onto an exact root.
            if p1 == p0 and q1 == 0:
                return results_select(full_output, p1, it, fevals,
                                      'secant')

            raise SingularDerivativeError(
                "secant() slope was zero.",
                details=f"f(p0) == f(p1) = {q1} at iteration {it}.",
                method='secant', p0=p0, p1=p1, iterations=it - 2,
                fevals=fevals)

        p = p1 - q1 * (p1 - p0) / (q1 - q0)
        report(it, p0=p0, p1=p1, q0=q0, q1=q1, p=p)

        if abs(p - p0) < tol:
            return results_select(full_output, p, it, fevals, 'secant')

        p0, q0 = p1, q1
        p1, q1 = p, func(p, *args)
        fevals += 1

    raise convergence_error('secant', maxits, p, fevals)
