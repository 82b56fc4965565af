"""Core expression tree components."""

from .node import Node, ConstantNode, VariableNode, OperationNode, format_number
from .operators import (
  NodeType, OpType, Notation, VARIADIC, VARIABLE_NAMES, OPERATION_NAMES, OPERATION_ARITY,
  is_variadic, minimum_arity, evaluate_variable, evaluate_constant, evaluate_operation
)
from .derivatives import DIFF_RULES
from .registry import OperationSpec, OPERATIONS, lookup_operation

__all__ = [
  'Node', 'ConstantNode', 'VariableNode', 'OperationNode', 'format_number',
  'NodeType', 'OpType', 'Notation', 'VARIADIC', 'VARIABLE_NAMES', 'OPERATION_NAMES', 'OPERATION_ARITY',
  'is_variadic', 'minimum_arity', 'evaluate_variable', 'evaluate_constant', 'evaluate_operation',
  'DIFF_RULES', 'OperationSpec', 'OPERATIONS', 'lookup_operation'
]
