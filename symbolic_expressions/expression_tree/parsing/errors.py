from enum import Enum
from typing import Optional


class ParseErrorKind(Enum):
  UNBALANCED_PARENTHESES = 'unbalanced_parentheses'
  INSUFFICIENT_OPERANDS = 'insufficient_operands'
  INSUFFICIENT_OPERATIONS = 'insufficient_operations'
  UNKNOWN_TOKEN = 'unknown_token'


class ExpressionParseError(ValueError):
  """Raised by strict parsing when the token stream is structurally malformed"""

  kind: Optional[ParseErrorKind] = None

  def __init__(self, message: str):
    super().__init__(message)
    self.message = message


class UnbalancedParenthesesError(ExpressionParseError):
  kind = ParseErrorKind.UNBALANCED_PARENTHESES

  def __init__(self):
    super().__init__("Unbalanced parentheses")


class InsufficientOperandsError(ExpressionParseError):
  kind = ParseErrorKind.INSUFFICIENT_OPERANDS

  def __init__(self, required: int, operation: str):
    super().__init__(f"Not enough operands, need {required} for {operation!r}")
    self.required = required
    self.operation = operation


class InsufficientOperationsError(ExpressionParseError):
  kind = ParseErrorKind.INSUFFICIENT_OPERATIONS

  def __init__(self, detail: str = ""):
    super().__init__("Not enough operations" + (f", {detail}" if detail else ""))


class UnknownTokenError(ExpressionParseError):
  kind = ParseErrorKind.UNKNOWN_TOKEN

  def __init__(self, token: str):
    super().__init__(f"Unknown token: {token}")
    self.token = token
