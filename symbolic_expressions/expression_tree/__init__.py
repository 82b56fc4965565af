"""Expression Tree Module

Expression nodes, the operation registry, parsing and rendering.
"""

from .expression import Expression
from .core.node import Node, ConstantNode, VariableNode, OperationNode
from .core.operators import (
  NodeType, OpType, Notation, VARIADIC, VARIABLE_NAMES, OPERATION_NAMES
)
from .core.registry import OperationSpec, OPERATIONS, lookup_operation
from .parsing import (
  ParseErrorKind, ExpressionParseError, UnbalancedParenthesesError,
  InsufficientOperandsError, InsufficientOperationsError, UnknownTokenError,
  tokenize, ParseOptions, StackParser, parse, parse_infix, parse_postfix, parse_prefix
)

__all__ = [
  "Expression",
  "Node", "ConstantNode", "VariableNode", "OperationNode",
  "NodeType", "OpType", "Notation", "VARIADIC", "VARIABLE_NAMES", "OPERATION_NAMES",
  "OperationSpec", "OPERATIONS", "lookup_operation",
  "ParseErrorKind", "ExpressionParseError", "UnbalancedParenthesesError",
  "InsufficientOperandsError", "InsufficientOperationsError", "UnknownTokenError",
  "tokenize", "ParseOptions", "StackParser", "parse", "parse_infix", "parse_postfix", "parse_prefix"
]
