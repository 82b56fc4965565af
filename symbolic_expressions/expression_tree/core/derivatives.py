"""Symbolic differentiation rules, one per operation kind.

Each rule receives the variable name and the undifferentiated operands and
returns a freshly built tree. Operands that reappear in the result are
copied, so a derivative never shares subtrees with its input.
"""

from functools import reduce
from typing import Callable, Dict
from .node import Node, ConstantNode, OperationNode
from .operators import OpType

DiffRule = Callable[..., Node]


def _op(op_type: OpType, *operands: Node) -> OperationNode:
  return OperationNode(op_type, *operands)


def _diff_add(var, a, b):
  return _op(OpType.ADD, a.differentiate(var), b.differentiate(var))


def _diff_sub(var, a, b):
  return _op(OpType.SUB, a.differentiate(var), b.differentiate(var))


def _diff_mul(var, a, b):
  # (a * b)' = a' * b + a * b'
  return _op(OpType.ADD,
             _op(OpType.MUL, a.differentiate(var), b.copy()),
             _op(OpType.MUL, a.copy(), b.differentiate(var)))


def _diff_div(var, a, b):
  # (a / b)' = (a' * b - a * b') / (b * b)
  return _op(OpType.DIV,
             _op(OpType.SUB,
                 _op(OpType.MUL, a.differentiate(var), b.copy()),
                 _op(OpType.MUL, a.copy(), b.differentiate(var))),
             _op(OpType.MUL, b.copy(), b.copy()))


def _diff_negate(var, a):
  return _op(OpType.NEGATE, a.differentiate(var))


def _diff_hypot(var, a, b):
  # (a*a + b*b)' = 2 * (a * a' + b * b')
  return _op(OpType.MUL,
             ConstantNode(2),
             _op(OpType.ADD,
                 _op(OpType.MUL, a.copy(), a.differentiate(var)),
                 _op(OpType.MUL, b.copy(), b.differentiate(var))))


def _diff_hmean(var, a, b):
  # 2ab / (a + b) differentiates to 2 * ((a*a * b' + b*b * a') / ((a + b) * (a + b)))
  return _op(OpType.MUL,
             ConstantNode(2),
             _op(OpType.DIV,
                 _op(OpType.ADD,
                     _op(OpType.MUL, _op(OpType.MUL, a.copy(), a.copy()), b.differentiate(var)),
                     _op(OpType.MUL, _op(OpType.MUL, b.copy(), b.copy()), a.differentiate(var))),
                 _op(OpType.MUL,
                     _op(OpType.ADD, a.copy(), b.copy()),
                     _op(OpType.ADD, a.copy(), b.copy()))))


def _fold(op_type: OpType, operands) -> Node:
  return reduce(lambda left, right: _op(op_type, left, right), operands)


def _diff_arith_mean(var, *args):
  return _op(OpType.DIV, _fold(OpType.ADD, args).differentiate(var), ConstantNode(len(args)))


def _diff_geom_mean(var, *args):
  # G = P^(1/n), so G' = (P / n)' / G^(n-1)
  n = len(args)
  denominator: Node = ConstantNode(1)
  for _ in range(n - 1):
    denominator = _op(OpType.MUL, denominator, _op(OpType.GEOM_MEAN, *(arg.copy() for arg in args)))
  numerator = _op(OpType.MUL, ConstantNode(1 / n), _fold(OpType.MUL, args)).differentiate(var)
  return _op(OpType.DIV, numerator, denominator)


def _diff_harm_mean(var, *args):
  reciprocal_sum = reduce(lambda acc, arg: _op(OpType.ADD, acc, _op(OpType.DIV, ConstantNode(1), arg)),
                          args, ConstantNode(0))
  return _op(OpType.DIV, ConstantNode(len(args)), reciprocal_sum).differentiate(var)


DIFF_RULES: Dict[OpType, DiffRule] = {
  OpType.ADD: _diff_add,
  OpType.SUB: _diff_sub,
  OpType.MUL: _diff_mul,
  OpType.DIV: _diff_div,
  OpType.NEGATE: _diff_negate,
  OpType.HYPOT: _diff_hypot,
  OpType.HMEAN: _diff_hmean,
  OpType.ARITH_MEAN: _diff_arith_mean,
  OpType.GEOM_MEAN: _diff_geom_mean,
  OpType.HARM_MEAN: _diff_harm_mean,
}
