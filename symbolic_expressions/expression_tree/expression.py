import numpy as np
import sympy as sp
from typing import Callable, Dict, Optional
from .core.node import Node
from .core.operators import Notation, VARIABLE_NAMES
from ..logging_system import log_debug


class Expression:
  """Expression tree root with cached renderings"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Dict[Notation, str] = {}

  def evaluate(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> float:
    return float(self.root.evaluate(np.array([x, y, z], dtype=np.float64)))

  def evaluate_batch(self, X: np.ndarray) -> np.ndarray:
    """Evaluate at many points, one row per point with columns x, y, z"""
    X = np.atleast_2d(np.asarray(X, dtype=np.float64))
    n_vars = len(VARIABLE_NAMES)
    if X.shape[1] > n_vars:
      raise ValueError(f"Expected at most {n_vars} columns, got {X.shape[1]}")
    if X.shape[1] < n_vars:
      X = np.hstack([X, np.zeros((X.shape[0], n_vars - X.shape[1]))])
    return np.broadcast_to(self.root.evaluate(X), (X.shape[0],)).copy()

  def differentiate(self, variable: str) -> 'Expression':
    log_debug(f"Differentiating {self.size()}-node expression by {variable}")
    return Expression(self.root.differentiate(variable))

  def render(self, notation: Notation) -> str:
    if notation not in self._string_cache:
      self._string_cache[notation] = self.root.render(notation)
    return self._string_cache[notation]

  def to_string(self) -> str:
    return self.render(Notation.PLAIN)

  def infix(self) -> str:
    return self.render(Notation.INFIX)

  def prefix(self) -> str:
    return self.render(Notation.PREFIX)

  def postfix(self) -> str:
    return self.render(Notation.POSTFIX)

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    from .utils.tree_utils import calculate_tree_depth
    return calculate_tree_depth(self.root)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def lambdify(self) -> Callable:
    """Numpy callable f(x, y, z) built through sympy"""
    symbols = sp.symbols(' '.join(VARIABLE_NAMES))
    return sp.lambdify(symbols, self.to_sympy(), modules='numpy')

  @classmethod
  def from_string(cls, expr_str: str, notation: Notation = Notation.INFIX,
                  strict: bool = False) -> Optional['Expression']:
    from .parsing.parser import parse
    return parse(expr_str, notation, strict)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.prefix()})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
