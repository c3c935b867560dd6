#!/usr/bin/env python3

# Examples of the solution of equations in one variable.

import math

from pyonevar.numeric.solve import (bisect_root, false_position,
                                    fixed_point, newton_raphson, secant,
                                    steffensen, SolverError)


def func_test(x):
    """Single positive root near x = 1.365."""
    return x ** 3 + 4 * x ** 2 - 10


def fixed_point_test(x):
    """Fixed point of this function is the positive root of func_test."""
    return 0.5 * math.sqrt(10 - x ** 3)


print("Considering the function x^3 + 4x^2 - 10.\n")

x = bisect_root(func_test, 1, 2, verbose=True)
print(f"Result x = {x}\n")

x = fixed_point(fixed_point_test, 1.5, verbose=True)
print(f"Result x = {x}  (solving the same equation as a fixed point)\n")

x = newton_raphson(func_test, 1.5, verbose=True)
print(f"Result x = {x}\n")

x = secant(func_test, 1, 2, verbose=True)
print(f"Result x = {x}\n")

x = false_position(func_test, 1, 2, verbose=True)
print(f"Result x = {x}\n")

x, res = steffensen(fixed_point_test, 1.5, full_output=True, verbose=True)
print(f"Result x = {x} after {res.iterations} iterations, "
      f"{res.function_calls} function calls.\n")

# Failures are raised as SolverError subclasses.
try:
    bisect_root(lambda x_: x_ ** 2 + 1, 0, 1)
except SolverError as err:
    print(f"Bisection failed as expected: {err}")
