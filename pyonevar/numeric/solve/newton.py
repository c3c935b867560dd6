"""
Find a zero of a real scalar function using the Newton-Raphson method,
where the derivative is not supplied by the caller but estimated using
a central difference.
"""
from __future__ import annotations

from collections.abc import Callable

from pyonevar.numeric.derivative import central_diff
from ._common import (DEFAULT_MAXITS, DEFAULT_TOL, check_options,
                      convergence_error, results_select)
from .exception import SingularDerivativeError
from .trace import VerboseArg, make_reporter

# Written by the pyonevar developers, October 2026.


# ======================================================================

def newton_raphson(func: Callable[..., float], p0: float, *,
                   tol: float = DEFAULT_TOL, maxits: int = DEFAULT_MAXITS,
                   h: float = 1e-10, args=(), full_output: bool = False,
                   verbose: VerboseArg = False):
    r"""
    Find a zero of `func` using the Newton-Raphson iteration
    :math:`p = p_0 - f(p_0) / f'(p_0)`.  The derivative is estimated at
    each step using `central_diff` with a fixed step `h`.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    p0 : float
        Initial estimate of the root.
    tol : float, default = 1e-6
        Stop when :math:`|p - p_0| < tol`.
    maxits : int, default = 1,000,000
        Iteration limit.
    h : float, default = 1e-10
        Central difference step, used as given at every iterate (not
        scaled to suit :math:`|p_0|`).
    args : optional
        Extra arguments passed to `func`.
    full_output : bool, default = False
        If True, return ``(x, RootResult)`` instead of just `x`.
    verbose : bool or Callable[[IterationRecord], None], default = False
        Trace sink receiving `p0`, `fp0`, `dfp0` and `p` for each
        iteration.  If True, print progress statements.

    Returns
    -------
    p : float
        Estimate of the root.

    Raises
    ------
    SingularDerivativeError
        If the estimated derivative is exactly zero at an iterate.
    ConvergenceError
        If `maxits` is reached before a solution is found.

    Notes
    -----
    Each iteration costs three function evaluations.  Because the
    difference step is so small the derivative estimate carries only
    around six significant figures; this slows the final approach to
    the root slightly but does not affect the converged value.

    Examples
    --------
    >>> f = lambda x: x**3 + 4 * x**2 - 10
    >>> round(newton_raphson(f, 1.5), 9)
    1.365230013
    """
    maxits = check_options(tol, maxits)
    report = make_reporter('newton_raphson', verbose)

    p, fevals = p0, 0
    for it in range(1, maxits + 1):
        f_p0 = func(p0, *args)
        df_p0 = central_diff(func, p0, h=h, args=args)
        fevals += 3

        if df_p0 == 0:
            # Reached a level state -> df/dp = 0.
            raise SingularDerivativeError(
                "newton_raphson() derivative was zero.",
                details=f"Iteration {it}, p0 = {p0}.",
                method='newton_raphson', x=p0, fx=f_p0, iterations=it - 1,
                fevals=fevals)

        p = p0 - f_p0 / df_p0
        report(it, p0=p0, fp0=f_p0, dfp0=df_p0, p=p)

        if abs(p - p0) < tol:
            return results_select(full_output, p, it, fevals,
                                  'newton_raphson')

        p0 = p

    raise convergence_error('newton_raphson', maxits, p, fevals)
