import numpy as np
from enum import Enum, IntEnum
from functools import reduce
from typing import Dict, Sequence, Union


class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  OPERATION = 2


class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  HYPOT = 4
  HMEAN = 5
  # Unary ops
  NEGATE = 6
  # Variadic ops
  ARITH_MEAN = 7
  GEOM_MEAN = 8
  HARM_MEAN = 9


class Notation(Enum):
  PLAIN = 'plain'
  INFIX = 'infix'
  PREFIX = 'prefix'
  POSTFIX = 'postfix'


class _Variadic:
  """Arity marker for operations accepting any positive operand count"""

  minimum = 1

  def __repr__(self) -> str:
    return 'VARIADIC'


VARIADIC = _Variadic()

Arity = Union[int, _Variadic]

# Order matters: position i is bound to column i of the evaluation input
VARIABLE_NAMES = ('x', 'y', 'z')

OPERATION_NAMES: Dict[str, OpType] = {
  '+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV,
  'negate': OpType.NEGATE,
  'hypot': OpType.HYPOT, 'hmean': OpType.HMEAN,
  'arithMean': OpType.ARITH_MEAN, 'geomMean': OpType.GEOM_MEAN,
  'harmMean': OpType.HARM_MEAN,
}

OPERATION_SYMBOLS: Dict[OpType, str] = {op: name for name, op in OPERATION_NAMES.items()}

# Rendered between operands in infix notation, everything else is call-style
INFIX_OPERATORS = frozenset({OpType.ADD, OpType.SUB, OpType.MUL, OpType.DIV})

OPERATION_ARITY: Dict[OpType, Arity] = {
  OpType.ADD: 2, OpType.SUB: 2, OpType.MUL: 2, OpType.DIV: 2,
  OpType.HYPOT: 2, OpType.HMEAN: 2,
  OpType.NEGATE: 1,
  OpType.ARITH_MEAN: VARIADIC, OpType.GEOM_MEAN: VARIADIC, OpType.HARM_MEAN: VARIADIC,
}


def is_variadic(op_type: OpType) -> bool:
  return OPERATION_ARITY[op_type] is VARIADIC


def minimum_arity(op_type: OpType) -> int:
  arity = OPERATION_ARITY[op_type]
  return arity.minimum if arity is VARIADIC else arity


def evaluate_variable(X, index):
  return np.asarray(X[..., index], dtype=np.float64)


def evaluate_constant(shape, value):
  return np.full(shape, value, dtype=np.float64)


def _geometric_mean(*values):
  product = reduce(np.multiply, values)
  # Negative products take the root of the absolute value
  return np.abs(product) ** (1.0 / len(values))


def _harmonic_mean(*values):
  return len(values) / reduce(np.add, (1.0 / v for v in values))


OPERATION_FUNCTIONS = {
  OpType.ADD: lambda a, b: a + b,
  OpType.SUB: lambda a, b: a - b,
  OpType.MUL: lambda a, b: a * b,
  OpType.DIV: lambda a, b: np.divide(a, b),
  OpType.NEGATE: lambda a: -a,
  OpType.HYPOT: lambda a, b: a * a + b * b,
  OpType.HMEAN: lambda a, b: 2.0 / (1.0 / a + 1.0 / b),
  OpType.ARITH_MEAN: lambda *values: reduce(np.add, values) / len(values),
  OpType.GEOM_MEAN: _geometric_mean,
  OpType.HARM_MEAN: _harmonic_mean,
}


def evaluate_operation(op_type: OpType, values: Sequence[np.ndarray]) -> np.ndarray:
  with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
    return np.asarray(OPERATION_FUNCTIONS[op_type](*values), dtype=np.float64)
