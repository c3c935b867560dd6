"""
Numerical Derivatives (:mod:`pyonevar.numeric.derivative`)
==========================================================

.. currentmodule:: pyonevar.numeric.derivative

Finite difference estimates of the derivative of a scalar function.
"""
from __future__ import annotations

from collections.abc import Callable


# ======================================================================

def central_diff(func: Callable[..., float], x: float, h: float = 1e-10,
                 args=()) -> float:
    r"""
    Estimate :math:`f'(x)` using the central difference
    :math:`(f(x + h) - f(x - h)) / 2h`.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Scalar function to differentiate.
    x : float
        Point at which the derivative is required.
    h : float, default = 1e-10
        Step size.  This is used as given and is not scaled to suit the
        magnitude of `x`.
    args : optional
        Extra arguments passed to `func`.

    Returns
    -------
    float
        Estimated derivative.

    Raises
    ------
    ValueError
        If ``h <= 0``.

    Notes
    -----
    The default step is very small and is not adapted to the local scale
    of `x`.  For large `|x|`, ``x + h`` and ``x - h`` may round to the
    same floating point value, giving an estimate of exactly zero.  Even
    for `x` near unity the round-off error is roughly
    :math:`\epsilon |f| / h`, so only about six significant figures can
    be expected.

    Examples
    --------
    >>> round(central_diff(lambda x: x ** 2, 3.0), 4)
    6.0
    """
    if h <= 0:
        raise ValueError(f"Step size h must be > 0, got {h}.")

    return (func(x + h, *args) - func(x - h, *args)) / (2 * h)
