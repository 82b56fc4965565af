import re
from typing import List, Optional, Union

OPEN_BRACKET = '('
CLOSE_BRACKET = ')'

_SPLIT_PATTERN = re.compile(r'([()\s])')
_INTEGER_PATTERN = re.compile(r'[+-]?\d+')
_DECIMAL_PATTERN = re.compile(r'[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?')


def tokenize(text: str) -> List[str]:
  """Split text into numbers, names and standalone parentheses, dropping whitespace"""
  return [token for token in _SPLIT_PATTERN.split(text) if token and not token.isspace()]


def parse_number(token: str) -> Optional[Union[int, float]]:
  """Return the numeric value of a literal token, or None if it is not one"""
  if _INTEGER_PATTERN.fullmatch(token):
    return int(token)
  if _DECIMAL_PATTERN.fullmatch(token):
    return float(token)
  return None
