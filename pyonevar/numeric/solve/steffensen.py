from __future__ import annotations

from collections.abc import Callable

from ._common import (DEFAULT_MAXITS, DEFAULT_TOL, check_options,
                      convergence_error, results_select)
from .exception import DegenerateAccelerationError
from .trace import VerboseArg, make_reporter

# Written by the pyonevar developers, October 2026.

AITKEN_EPS = 1e-12


# ======================================================================

def steffensen(func: Callable[..., float], p0: float, *,
               tol: float = DEFAULT_TOL, maxits: int = DEFAULT_MAXITS,
               args=(), full_output: bool = False,
               verbose: VerboseArg = False):
    r"""
    Find the fixed point of :math:`x = g(x)` using Steffensen's method.
    Each iteration takes two plain fixed-point steps and then applies
    Aitken's :math:`\Delta^2` extrapolation:

    .. math::
        p_1 = g(p_0), \quad p_2 = g(p_1), \quad
        p = p_0 - \frac{(p_1 - p_0)^2}{p_2 - 2 p_1 + p_0}

    This normally converges quadratically, i.e. in far fewer iterations
    than `fixed_point` for the same function, and requires no
    derivative.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function :math:`g(x)` whose fixed point is required.
    p0 : float
        Starting value.
    tol : float, default = 1e-6
        Stop when :math:`|p - p_0| < tol`.
    maxits : int, default = 1,000,000
        Iteration limit.
    args : optional
        Extra arguments passed to `func`.
    full_output : bool, default = False
        If True, return ``(x, RootResult)`` instead of just `x`.
    verbose : bool or Callable[[IterationRecord], None], default = False
        Trace sink receiving `p0`, `p1`, `p2` and `p` for each
        iteration.  If True, print progress statements.

    Returns
    -------
    p : float
        Converged fixed point.

    Raises
    ------
    DegenerateAccelerationError
        If :math:`|p_2 - 2 p_1 + p_0| <` `AITKEN_EPS` (1e-12) at any
        iteration.
    ConvergenceError
        If `maxits` is reached before a solution is found.

    Notes
    -----
    If an iterate lands exactly on the fixed point, the next iteration
    gives :math:`p_2 = p_1 = p_0` and therefore raises
    `DegenerateAccelerationError`.  The same happens for linear `func`,
    where the first extrapolation is already exact.

    Examples
    --------
    >>> import math
    >>> def g(x_): return 0.5 * math.sqrt(10 - x_ ** 3)
    >>> round(steffensen(g, 1.5), 9)
    1.365230013
    """
    maxits = check_options(tol, maxits)
    report = make_reporter('steffensen', verbose)

    p = p0
    for it in range(1, maxits + 1):
        p1 = func(p0, *args)
        p2 = func(p1, *args)

        denominator = p2 - 2 * p1 + p0
        if abs(denominator) < AITKEN_EPS:
            raise DegenerateAccelerationError(
                "steffensen() Aitken denominator near zero.",
                details=f"|p2 - 2*p1 + p0| = {abs(denominator)} at "
                        f"iteration {it}.",
                method='steffensen', p0=p0, p1=p1, p2=p2,
                iterations=it - 1, fevals=2 * it)

        p = p0 - (p1 - p0) ** 2 / denominator
        report(it, p0=p0, p1=p1, p2=p2, p=p)

        if abs(p - p0) < tol:
            return results_select(full_output, p, it, 2 * it, 'steffensen')

        p0 = p

    raise convergence_error('steffensen', maxits, p, 2 * maxits)
