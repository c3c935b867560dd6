# Written by the pyonevar developers, October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a solver fails to converge or find a
    solution.  Additional information (optional) is included to allow
    the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.  Most solvers attach:

    - `method`: Name of the solver that failed.
    - `iterations`: Number of iterations completed.
    - `fevals`: Number of function evaluations.
    """
    default_flag = None

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result.  If omitted, the default code for the exception
            class is used.  Codes are always nonzero as ``flag == 0``
            indicates a successful solution.
        details : str, default = None
            Additional text relating to the specific type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        if flag is None:
            flag = self.default_flag
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class ConvergenceError(SolverError):
    """
    The iteration limit was reached before the convergence criterion
    was satisfied.  The exhausted limit is available as `maxits` and the
    last iterate computed as `x`.
    """
    default_flag = 1


class BracketError(SolverError, ValueError):
    """
    The function values at the starting points of a bracketing method
    do not have opposite signs.  No iterations are performed.  Also a
    `ValueError` as this is an illegal starting condition.

    Signs are compared with ``np.sign`` rather than by forming the
    product, so tiny values of the same sign (e.g. both ``1e-200``)
    still raise this error even though their product underflows to
    zero.
    """
    default_flag = 2


class SingularDerivativeError(SolverError):
    """
    The (estimated) derivative or secant slope used to compute the next
    step was exactly zero, so no step can be taken.
    """
    default_flag = 3


class DegenerateAccelerationError(SolverError):
    """
    The denominator of Aitken's Δ² extrapolation became too small,
    i.e. the last three iterates are (nearly) collinear.
    """
    default_flag = 4
