from __future__ import annotations

from collections.abc import Callable

from ._common import (DEFAULT_MAXITS, DEFAULT_TOL, check_options,
                      convergence_error, results_select)
from .trace import VerboseArg, make_reporter

# Written by the pyonevar developers, October 2026.


# ======================================================================

def fixed_point(func: Callable[..., float], p0: float, *,
                tol: float = DEFAULT_TOL, maxits: int = DEFAULT_MAXITS,
                args=(), full_output: bool = False,
                verbose: VerboseArg = False):
    r"""
    Find the fixed point of a function :math:`x = g(x)` by direct
    iteration :math:`p_{n+1} = g(p_n)`.

    Convergence is only obtained if `func` is a contraction near the
    fixed point (:math:`|g'(x)| < 1`).  This cannot be checked here;
    a diverging or oscillating sequence simply exhausts `maxits`.

    Examples
    --------
    The root of :math:`x^3 + 4x^2 - 10 = 0` near 1.365 is the fixed
    point of :math:`g(x) = \frac{1}{2}\sqrt{10 - x^3}`:

        >>> import math
        >>> def g(x_): return 0.5 * math.sqrt(10 - x_ ** 3)
        >>> x, res = fixed_point(g, 1.5, full_output=True)
        >>> round(x, 5), res.converged
        (1.36523, True)

    Passing ``verbose=True`` prints each iteration in the form
    ``... Iteration 1: p0 = 1.5, p = 1.28695377``.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function :math:`g(x)` that returns a better estimate of `x`.
    p0 : float
        Starting value.
    tol : float, default = 1e-6
        Stop when :math:`|g(p_0) - p_0| < tol`.
    maxits : int, default = 1,000,000
        Iteration limit.
    args : optional
        Extra arguments passed to `func`.
    full_output : bool, default = False
        If True, return ``(x, RootResult)`` instead of just `x`.
    verbose : bool or Callable[[IterationRecord], None], default = False
        Trace sink receiving `p0` and `p` for each iteration.  If True,
        print iterations.

    Returns
    -------
    p : float
        Converged fixed point.

    Raises
    ------
    ConvergenceError
        If `maxits` is exceeded.
    """
    maxits = check_options(tol, maxits)
    report = make_reporter('fixed_point', verbose)

    p = p0
    for it in range(1, maxits + 1):
        p = func(p0, *args)
        report(it, p0=p0, p=p)

        if abs(p - p0) < tol:
            return results_select(full_output, p, it, it, 'fixed_point')

        p0 = p

    raise convergence_error('fixed_point', maxits, p, maxits)
