"""
Numeric (:mod:`pyonevar.numeric`)
=================================

.. currentmodule:: pyonevar.numeric

Core numeric functions used throughout pyonevar.

.. autosummary::
    :toctree:

    solve
    derivative

"""
from .derivative import central_diff
