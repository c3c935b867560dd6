from __future__ import annotations

from collections.abc import Callable

from ._common import (DEFAULT_MAXITS, DEFAULT_TOL, check_options,
                      convergence_error, results_select, same_sign)
from .exception import BracketError
from .trace import VerboseArg, make_reporter

# Written by the pyonevar developers, October 2026.


# ======================================================================

def bisect_root(func: Callable[..., float], x_a: float, x_b: float, *,
                tol: float = DEFAULT_TOL, maxits: int = DEFAULT_MAXITS,
                args=(), full_output: bool = False,
                verbose: VerboseArg = False):
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [x_a, x_b]` by the bisection method.  For bisection to work
    :math:`f(x)` must change sign across the interval, i.e. ``func(x_a)``
    and ``func(x_b)`` must return values of opposite sign.

    Examples
    --------
    >>> f = lambda x: x**3 + 4 * x**2 - 10
    >>> round(bisect_root(f, 1.0, 2.0, tol=1e-4), 4)
    1.3652
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> bisect_root(f, 0, 1, maxits=10)  # Only 1 it. (soln was in centre).
    0.5

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    x_a, x_b : float
        Left and right ends of the search interval.
    tol : float, default = 1e-6
        End search when :math:`|f(p)| < tol`.  Note that this is a test
        on the function value, not on the width of the interval.
    maxits : int, default = 1,000,000
        Maximum number of iterations.
    args : optional
        Extra arguments passed to `func`.
    full_output : bool, default = False
        If True, return ``(x, RootResult)`` instead of just `x`.
    verbose : bool or Callable[[IterationRecord], None], default = False
        Trace sink receiving `a`, `b`, `p` and `fp` for each iteration.
        If True, print progress statements.

    Returns
    -------
    p : float
        Best estimate of root found i.e. :math:`f(p) \approx 0`.

    Raises
    ------
    BracketError
        If ``func(x_a)`` and ``func(x_b)`` have the same sign.  Signs are
        compared directly, so ``func(x_a) = func(x_b) = 1e-200`` raises
        even though the product ``1e-400`` would underflow to zero.
    ConvergenceError
        If `maxits` is reached before a solution is found.

    Notes
    -----
    If either ``func(x_a)`` or ``func(x_b)`` is exactly zero, that end
    point is returned immediately without iterating.
    """
    maxits = check_options(tol, maxits)
    report = make_reporter('bisect_root', verbose)

    a, b = x_a, x_b
    f_a, f_b = func(a, *args), func(b, *args)
    fevals = 2

    for x, f_x in ((a, f_a), (b, f_b)):
        if f_x == 0:
            return results_select(full_output, x, 0, fevals, 'bisect_root')

    if same_sign(f_a, f_b):
        raise BracketError("bisect_root() requires f(x_a) and f(x_b) to "
                           "have opposite signs.", method='bisect_root',
                           x_a=x_a, x_b=x_b, f_a=f_a, f_b=f_b,
                           iterations=0, fevals=fevals)

    p = a
    for it in range(1, maxits + 1):
        # Compute midpoint.
        p = a + (b - a) / 2
        f_p = func(p, *args)
        fevals += 1
        report(it, a=a, b=b, p=p, fp=f_p)

        # Check stopping criteria.
        if abs(f_p) < tol:
            return results_select(full_output, p, it, fevals, 'bisect_root')

        # Check which side root is on, narrow interval.
        if same_sign(f_a, f_p):
            a, f_a = p, f_p
        else:
            b = p

    raise convergence_error('bisect_root', maxits, p, fevals)
