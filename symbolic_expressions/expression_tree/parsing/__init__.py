"""Tokenizer and stack parser for infix, prefix and postfix text."""

from .errors import (
  ParseErrorKind, ExpressionParseError, UnbalancedParenthesesError,
  InsufficientOperandsError, InsufficientOperationsError, UnknownTokenError
)
from .tokenizer import tokenize, parse_number
from .parser import (
  Direction, ParseOptions, StackParser, parse, parse_infix, parse_postfix, parse_prefix
)

__all__ = [
  'ParseErrorKind', 'ExpressionParseError', 'UnbalancedParenthesesError',
  'InsufficientOperandsError', 'InsufficientOperationsError', 'UnknownTokenError',
  'tokenize', 'parse_number',
  'Direction', 'ParseOptions', 'StackParser', 'parse', 'parse_infix', 'parse_postfix', 'parse_prefix'
]
