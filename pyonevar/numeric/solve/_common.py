"""
Shared defaults, option checks and result handling for the scalar
solvers in :mod:`pyonevar.numeric.solve`.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass

import numpy as np

from .exception import ConvergenceError

# Written by the pyonevar developers, October 2026.

DEFAULT_TOL = 1e-6
DEFAULT_MAXITS = 1_000_000

FLAG_CONVERGED = 0


# ======================================================================

@dataclass(frozen=True, kw_only=True)
class RootResult:
    """
    Summary of a successful solution, returned alongside the root when
    a solver is called with ``full_output=True``.

    Parameters
    ----------
    root : float
        Converged value.
    iterations : int
        Iteration number at which the solver converged (or zero if a
        starting point was already an exact root).
    function_calls : int
        Number of evaluations of the user function.
    flag : int
        Status code, always ``0`` (`FLAG_CONVERGED`) for a returned
        result.  Failures are raised as `SolverError` subclasses.
    method : str
        Name of the solver.
    """
    root: float
    iterations: int
    function_calls: int
    flag: int = FLAG_CONVERGED
    method: str

    @property
    def converged(self) -> bool:
        return self.flag == FLAG_CONVERGED


# ----------------------------------------------------------------------

def check_options(tol: float, maxits: int) -> int:
    """
    Check solver tolerance and iteration limit, returning `maxits` as
    an `int`.

    Raises
    ------
    ValueError
        If ``tol <= 0`` or ``maxits < 1``.
    TypeError
        If `maxits` is not an integer type.
    """
    if not tol > 0:
        raise ValueError(f"tol too small ({tol} <= 0).")

    maxits = operator.index(maxits)
    if maxits < 1:
        raise ValueError("maxits must be greater than 0.")

    return maxits


def same_sign(a: float, b: float) -> bool:
    """
    Returns ``True`` if `a` and `b` are both positive or both negative,
    i.e. ``a * b > 0`` in exact arithmetic.  The product is not formed,
    so ``same_sign(1e-200, 1e-200)`` is ``True`` where the floating
    point product would underflow to zero.
    """
    return bool(np.sign(a) * np.sign(b) > 0)


def results_select(full_output: bool, root: float, iterations: int,
                   fevals: int, method: str):
    """Return `root` or ``(root, RootResult)`` depending on `full_output`."""
    if full_output:
        return root, RootResult(root=root, iterations=iterations,
                                function_calls=fevals, method=method)
    return root


def convergence_error(method: str, maxits: int, x: float,
                      fevals: int) -> ConvergenceError:
    """Build the standard `ConvergenceError` for an exhausted budget."""
    if np.isfinite(x):
        details = "Reached maxits."
    else:
        details = "Reached maxits, last iterate was not finite."

    return ConvergenceError(f"{method}() failed to converge after {maxits} "
                            f"iterations.", details=details,
                            method=method, maxits=maxits, x=x,
                            iterations=maxits, fevals=fevals)
