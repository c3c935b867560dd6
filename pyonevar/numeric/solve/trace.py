"""
Iteration Tracing (:mod:`pyonevar.numeric.solve.trace`)
=======================================================

.. currentmodule:: pyonevar.numeric.solve.trace

Every solver in :mod:`pyonevar.numeric.solve` can report the working
values of each iteration through its `verbose` argument.  This may be:

- ``False`` / ``None``: No output (default).
- ``True`` (or any other truthy, non-callable value): Print each
  iteration using `print_record`.
- Any callable accepting an `IterationRecord`, e.g. a `TraceRecorder`.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Union


# Written by the pyonevar developers, October 2026.


# ======================================================================

@dataclass(frozen=True, kw_only=True)
class IterationRecord:
    """
    Working values of a solver for a single iteration.

    Parameters
    ----------
    method : str
        Name of the solver producing the record.
    iteration : int
        Iteration number (see individual solvers for the numbering
        used).
    values : Mapping[str, float]
        Working values in the order they should be displayed, e.g.
        ``{'a': 1.0, 'b': 2.0, 'p': 1.5, 'fp': 2.375}``.
    """
    method: str
    iteration: int
    values: Mapping[str, float] = field(default_factory=dict)

    def __getitem__(self, name: str) -> float:
        return self.values[name]

    def __str__(self):
        vals = ', '.join(f"{k} = {v:.9g}"
                         for k, v in self.values.items())
        return f"... Iteration {self.iteration}: {vals}"


TraceSink = Callable[[IterationRecord], None]
VerboseArg = Union[bool, TraceSink, None]


# ----------------------------------------------------------------------

def print_record(record: IterationRecord):
    """Trace sink that prints each record to ``stdout``."""
    print(str(record))


# ----------------------------------------------------------------------

class TraceRecorder:
    """
    Trace sink that keeps every `IterationRecord` it receives, in
    order, in the `records` list.

    Examples
    --------
    >>> from pyonevar.numeric.solve import bisect_root
    >>> rec = TraceRecorder()
    >>> x = bisect_root(lambda x: 2 * x - 1, 0.0, 2.0, verbose=rec)
    >>> len(rec), rec[-1]['p']
    (2, 0.5)
    """

    def __init__(self):
        self.records: list[IterationRecord] = []

    def __call__(self, record: IterationRecord):
        self.records.append(record)

    def __getitem__(self, idx: int) -> IterationRecord:
        return self.records[idx]

    def __iter__(self):
        return iter(self.records)

    def __len__(self):
        return len(self.records)

    def column(self, name: str) -> list[float]:
        """Return the history of working value `name`."""
        return [rec[name] for rec in self.records]


# ----------------------------------------------------------------------

def make_reporter(method: str, verbose: VerboseArg
                  ) -> Callable[..., None]:
    """
    Build the reporting function used inside a solver.  The returned
    function is called as ``report(iteration, name=value, ...)``; it
    does nothing if `verbose` is falsy.  A callable `verbose` is used as
    the sink, any other truthy value (e.g. ``np.True_`` or ``1``)
    prints.
    """
    if callable(verbose):
        sink = verbose
    elif verbose:
        sink = print_record
        print(f"{_TITLES.get(method, method)}:")
    else:
        return _report_nothing

    def report(iteration: int, **values: float):
        sink(IterationRecord(method=method, iteration=iteration,
                             values=values))

    return report


def _report_nothing(iteration: int, **values: float):
    pass


_TITLES = {'bisect_root': "Bisecting Root",
           'false_position': "False Position (Regula Falsi)",
           'fixed_point': "Fixed Point Iteration",
           'newton_raphson': "Newton-Raphson",
           'secant': "Secant Method",
           'steffensen': "Steffensen's Method"}
