"""Symbolic Expressions Package

Expression trees over x, y and z: numeric evaluation, symbolic
differentiation, and infix/prefix/postfix text in both directions.
"""

from .expression_tree import (
  Expression, Node, ConstantNode, VariableNode, OperationNode,
  OpType, Notation, VARIABLE_NAMES, OPERATIONS,
  ParseErrorKind, ExpressionParseError, UnbalancedParenthesesError,
  InsufficientOperandsError, InsufficientOperationsError, UnknownTokenError,
  tokenize, ParseOptions, StackParser, parse, parse_infix, parse_postfix, parse_prefix
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ConstantNode", "VariableNode", "OperationNode",
  "OpType", "Notation", "VARIABLE_NAMES", "OPERATIONS",
  "ParseErrorKind", "ExpressionParseError", "UnbalancedParenthesesError",
  "InsufficientOperandsError", "InsufficientOperationsError", "UnknownTokenError",
  "tokenize", "ParseOptions", "StackParser", "parse", "parse_infix", "parse_postfix", "parse_prefix",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
