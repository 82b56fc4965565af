"""SymPy interop and numeric checks for derivatives."""

from typing import Dict, Optional, Sequence

import numpy as np
import sympy as sp

from ..core.operators import VARIABLE_NAMES
from ..expression import Expression


def to_sympy_expression(expression: Expression, simplify: bool = False) -> sp.Expr:
  sympy_expr = expression.to_sympy()
  return sp.simplify(sympy_expr) if simplify else sympy_expr


def sympy_derivative(expression: Expression, variable: str) -> sp.Expr:
  """Reference derivative computed by sympy, for cross-checking"""
  return sp.diff(expression.to_sympy(), sp.Symbol(variable))


def _point(point: Sequence[float]) -> np.ndarray:
  values = np.zeros(len(VARIABLE_NAMES), dtype=np.float64)
  values[:len(point)] = point
  return values


def numeric_derivative(expression: Expression, variable: str, point: Sequence[float],
                       h: float = 1e-6) -> float:
  """Central finite difference of the expression along one variable"""
  index = VARIABLE_NAMES.index(variable)
  step = np.zeros(len(VARIABLE_NAMES))
  step[index] = h
  base = _point(point)
  forward = expression.evaluate(*(base + step))
  backward = expression.evaluate(*(base - step))
  return (forward - backward) / (2 * h)


def derivative_matches(expression: Expression, variable: str, point: Sequence[float],
                       rtol: float = 1e-4, atol: float = 1e-6,
                       derivative: Optional[Expression] = None) -> bool:
  """Compare the symbolic derivative at a point with a finite difference"""
  if derivative is None:
    derivative = expression.differentiate(variable)
  symbolic = derivative.evaluate(*_point(point))
  numeric = numeric_derivative(expression, variable, point)
  return bool(np.isclose(symbolic, numeric, rtol=rtol, atol=atol))


def sympy_values(expression: Expression, points: np.ndarray) -> np.ndarray:
  """Evaluate through sympy.lambdify, one row per point"""
  points = np.atleast_2d(np.asarray(points, dtype=np.float64))
  func = expression.lambdify()
  columns = [points[:, i] if i < points.shape[1] else np.zeros(points.shape[0])
             for i in range(len(VARIABLE_NAMES))]
  return np.broadcast_to(func(*columns), (points.shape[0],)).astype(np.float64)


def describe(expression: Expression) -> Dict[str, str]:
  return {
    'plain': expression.to_string(),
    'infix': expression.infix(),
    'prefix': expression.prefix(),
    'postfix': expression.postfix(),
    'sympy': str(expression.to_sympy()),
  }
