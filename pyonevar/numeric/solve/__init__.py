"""
=======================================
Solvers (:mod:`pyonevar.numeric.solve`)
=======================================

.. currentmodule:: pyonevar.numeric.solve

Classical iterative methods for solving equations in one variable.  All
solvers share the same calling convention::

    x = solver(func, <start point/s>, tol=1e-6, maxits=1_000_000,
               args=(), full_output=False, verbose=False)

Bracketing methods (`bisect_root`, `false_position`) need two starting
points giving function values of opposite sign.  Open methods
(`fixed_point`, `newton_raphson`, `secant`, `steffensen`) have no sign
requirement but can diverge.

Functions
---------

.. autosummary::
    :toctree:

    bisect_root
    false_position
    fixed_point
    newton_raphson
    secant
    steffensen

Results and Tracing
-------------------

.. autosummary::
    :toctree:

    RootResult
    IterationRecord
    TraceRecorder
    print_record

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    BracketError
    ConvergenceError
    DegenerateAccelerationError
    SingularDerivativeError

"""

from ._common import DEFAULT_MAXITS, DEFAULT_TOL, RootResult
from .bisect_root import bisect_root
from .exception import (SolverError, BracketError, ConvergenceError,
                        DegenerateAccelerationError,
                        SingularDerivativeError)
from .false_position import false_position
from .fixed_point import fixed_point
from .newton import newton_raphson
from .secant import secant
from .steffensen import steffensen
from .trace import IterationRecord, TraceRecorder, print_record
