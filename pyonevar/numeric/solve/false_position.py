from __future__ import annotations

from collections.abc import Callable

from ._common import (DEFAULT_MAXITS, DEFAULT_TOL, check_options,
                      convergence_error, results_select, same_sign)
from .exception import BracketError
from .trace import VerboseArg, make_reporter

# Written by the pyonevar developers, October 2026.


# ======================================================================

def false_position(func: Callable[..., float], p0: float, p1: float, *,
                   tol: float = DEFAULT_TOL, maxits: int = DEFAULT_MAXITS,
                   args=(), full_output: bool = False,
                   verbose: VerboseArg = False):
    r"""
    Approximate solution of :math:`f(x) = 0` using the method of False
    Position (Regula Falsi).  Each new point is the root of the line
    through :math:`(p_0, f(p_0))` and :math:`(p_1, f(p_1))`, and the
    pair of points retained always brackets the root.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    p0, p1 : float
        Starting points; ``func(p0)`` and ``func(p1)`` must have
        opposite signs.
    tol : float, default = 1e-6
        Stop when :math:`|p - p_1| < tol`, where :math:`p_1` is the most
        recently computed point.
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
    BracketError
        If ``func(p0)`` and ``func(p1)`` have the same sign.  Signs are
        compared directly, so ``func(p0) = func(p1) = 1e-200`` raises
        even though the product ``1e-400`` would underflow to zero.
    ConvergenceError
        If `maxits` is reached before a solution is found.

    Notes
    -----
    - Unlike bisection, one end of the bracket may be retained for many
      iterations when the function is convex or concave across the
      bracket.  Convergence is then one-sided and only linear.
    - If either starting value is exactly zero, that point is returned
      immediately without iterating.

    Examples
    --------
    >>> f = lambda x: x**3 + 4 * x**2 - 10
    >>> round(false_position(f, 1.0, 2.0), 6)
    1.36523
    """
    maxits = check_options(tol, maxits)
    report = make_reporter('false_position', verbose)

    q0, q1 = func(p0, *args), func(p1, *args)
    fevals = 2

    for x, q in ((p0, q0), (p1, q1)):
        if q == 0:
            return results_select(full_output, x, 0, fevals,
                                  'false_position')

    if same_sign(q0, q1):
        raise BracketError("false_position() requires f(p0) and f(p1) to "
                           "have opposite signs.", method='false_position',
                           p0=p0, p1=p1, q0=q0, q1=q1, iterations=0,
                           fevals=fevals)

    p = p1
    for it in range(2, maxits + 1):
        p = p1 - q1 * (p1 - p0) / (q1 - q0)
        report(it, p0=p0, p1=p1, q0=q0, q1=q1, p=p)

        if abs(p - p1) < tol:
            return results_select(full_output, p, it, fevals,
                                  'false_position')

        q = func(p, *args)
        fevals += 1

        # Keep the bracket: drop p0 if the root now lies between p1, p.
        if same_sign(-q, q1):
            p0, q0 = p1, q1

        p1, q1 = p, q

    raise convergence_error('false_position', maxits, p, fevals)
