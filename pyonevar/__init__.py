"""
.. This module acts as the top-level API documentation.

.. module: pyonevar

**pyonevar** provides classical iterative methods for solving equations
in one variable, :math:`f(x) = 0` or :math:`g(x) = x`.

.. autosummary::
    :toctree: generated/

    numeric
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)
