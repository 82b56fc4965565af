import math
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from functools import reduce
from typing import Optional, Tuple, Union
from .operators import (
  NodeType, OpType, Notation, VARIABLE_NAMES, OPERATION_SYMBOLS, INFIX_OPERATORS,
  evaluate_variable, evaluate_constant, evaluate_operation
)

Number = Union[int, float]


def format_number(value: Number) -> str:
  """Canonical text of a constant: integral values print without a fraction"""
  if isinstance(value, float) and math.isfinite(value) and value.is_integer():
    return str(int(value))
  return str(value)


class Node(ABC):
  """Immutable expression tree node with cached size and hash"""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def evaluate(self, X: np.ndarray) -> np.ndarray:
    pass

  @abstractmethod
  def differentiate(self, variable: str) -> 'Node':
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def prefix(self) -> str:
    pass

  @abstractmethod
  def postfix(self) -> str:
    pass

  @abstractmethod
  def infix(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def render(self, notation: Notation) -> str:
    if notation is Notation.PLAIN:
      return self.to_string()
    elif notation is Notation.PREFIX:
      return self.prefix()
    elif notation is Notation.POSTFIX:
      return self.postfix()
    elif notation is Notation.INFIX:
      return self.infix()
    raise ValueError(f"Unknown notation: {notation}")

  def size(self) -> int:
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  def _compute_size(self) -> int:
    return 1

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self._key() == other._key()

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def __str__(self) -> str:
    return self.to_string()


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: Number):
    super().__init__()
    self.value = value

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    return evaluate_constant(np.shape(X)[:-1], self.value)

  def differentiate(self, variable: str) -> 'ConstantNode':
    return ConstantNode(0)

  def to_string(self) -> str:
    return format_number(self.value)

  prefix = postfix = infix = to_string

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.sympify(self.value)

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))

  def _key(self) -> tuple:
    return (NodeType.CONSTANT, self.value)

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"


class VariableNode(Node):
  __slots__ = ('name', 'index')

  def __init__(self, name: str):
    super().__init__()
    if name not in VARIABLE_NAMES:
      raise ValueError(f"Unknown variable {name!r}, expected one of {VARIABLE_NAMES}")
    self.name = name
    self.index = VARIABLE_NAMES.index(name)

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    return evaluate_variable(X, self.index)

  def differentiate(self, variable: str) -> ConstantNode:
    return ConstantNode(1 if variable == self.name else 0)

  def to_string(self) -> str:
    return self.name

  prefix = postfix = infix = to_string

  def copy(self) -> 'VariableNode':
    return VariableNode(self.name)

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _key(self) -> tuple:
    return (NodeType.VARIABLE, self.name)

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class OperationNode(Node):
  __slots__ = ('op_type', 'operands')

  def __init__(self, op_type: OpType, *operands: Node):
    super().__init__()
    if not isinstance(op_type, OpType):
      raise ValueError(f"Operation kind must be an OpType, got {op_type!r}")
    self.op_type = op_type
    self.operands: Tuple[Node, ...] = operands

  @property
  def symbol(self) -> str:
    return OPERATION_SYMBOLS[self.op_type]

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    values = [operand.evaluate(X) for operand in self.operands]
    return evaluate_operation(self.op_type, values)

  def differentiate(self, variable: str) -> Node:
    # Import here to avoid circular imports
    from .registry import OPERATIONS
    return OPERATIONS[self.op_type].diff(variable, *self.operands)

  def to_string(self) -> str:
    return " ".join(operand.to_string() for operand in self.operands) + " " + self.symbol

  def prefix(self) -> str:
    return "(" + self.symbol + " " + " ".join(operand.prefix() for operand in self.operands) + ")"

  def postfix(self) -> str:
    return "(" + " ".join(operand.postfix() for operand in self.operands) + " " + self.symbol + ")"

  def infix(self) -> str:
    if self.op_type in INFIX_OPERATORS and len(self.operands) == 2:
      left, right = self.operands
      return f"({left.infix()} {self.symbol} {right.infix()})"
    return "(" + " ".join([self.symbol] + [operand.infix() for operand in self.operands]) + ")"

  def copy(self) -> 'OperationNode':
    return OperationNode(self.op_type, *(operand.copy() for operand in self.operands))

  def _compute_size(self) -> int:
    return 1 + sum(operand.size() for operand in self.operands)

  def _compute_hash(self) -> int:
    return hash((NodeType.OPERATION, self.op_type, tuple(hash(operand) for operand in self.operands)))

  def _key(self) -> tuple:
    return (NodeType.OPERATION, self.op_type, self.operands)

  def to_sympy(self) -> sp.Expr:
    args = [operand.to_sympy() for operand in self.operands]
    if self.op_type == OpType.ADD:
      return sp.Add(*args)
    elif self.op_type == OpType.SUB:
      return sp.Add(args[0], sp.Mul(-1, args[1]))
    elif self.op_type == OpType.MUL:
      return sp.Mul(*args)
    elif self.op_type == OpType.DIV:
      return sp.Mul(args[0], sp.Pow(args[1], -1))
    elif self.op_type == OpType.NEGATE:
      return -args[0]
    elif self.op_type == OpType.HYPOT:
      return args[0] ** 2 + args[1] ** 2
    elif self.op_type == OpType.HMEAN:
      return 2 / (1 / args[0] + 1 / args[1])
    elif self.op_type == OpType.ARITH_MEAN:
      return sp.Add(*args) / len(args)
    elif self.op_type == OpType.GEOM_MEAN:
      return sp.Abs(reduce(sp.Mul, args)) ** sp.Rational(1, len(args))
    elif self.op_type == OpType.HARM_MEAN:
      return len(args) / sp.Add(*[1 / arg for arg in args])
    else:
      raise ValueError(f"No sympy form for operation {self.op_type}")

  def __repr__(self) -> str:
    operands = ", ".join(repr(operand) for operand in self.operands)
    return f"OperationNode({self.op_type.name}, {operands})" if operands else f"OperationNode({self.op_type.name})"
