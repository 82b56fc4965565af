"""
Stack Parser

One algorithm reconstructs trees from infix, postfix and prefix token
streams. Operands are collected on a stack; every open bracket records the
stack depth at which its group starts so variadic operations know how many
operands belong to them.

Prefix text is read back to front with the roles of the two brackets
swapped, which turns it into postfix. Operands popped in that direction come
off the stack last-first and are reversed before the operation is built.

In infix notation an operation whose operands have not all been read yet is
held as pending in its group and applied as soon as enough operands follow.
Variadic operations cannot know when their operands end and are applied
when their group closes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Sequence

from ..core.node import Node, ConstantNode, VariableNode, OperationNode
from ..core.operators import Notation, VARIABLE_NAMES, is_variadic, minimum_arity
from ..core.registry import OperationSpec, lookup_operation
from ...logging_system import log_debug, log_detail, log_warning
from .errors import (
  ExpressionParseError, UnbalancedParenthesesError, InsufficientOperandsError,
  InsufficientOperationsError, UnknownTokenError
)
from .tokenizer import OPEN_BRACKET, CLOSE_BRACKET, tokenize, parse_number

if TYPE_CHECKING:
  from ..expression import Expression


class Direction(Enum):
  FORWARD = 'forward'
  REVERSE = 'reverse'


@dataclass(frozen=True)
class ParseOptions:
  notation: Notation = Notation.INFIX
  strict: bool = False

  @property
  def direction(self) -> Direction:
    return Direction.REVERSE if self.notation is Notation.PREFIX else Direction.FORWARD

  @property
  def holds_pending(self) -> bool:
    return self.notation in (Notation.INFIX, Notation.PLAIN)


class _Pending(NamedTuple):
  spec: OperationSpec
  base: int


class _Group:
  __slots__ = ('start', 'pending')

  def __init__(self, start: int):
    self.start = start
    self.pending: List[_Pending] = []


class StackParser:
  """Rebuilds an expression tree from a token sequence"""

  def __init__(self, options: Optional[ParseOptions] = None):
    self.options = options or ParseOptions()
    reverse = self.options.direction is Direction.REVERSE
    self.opener = CLOSE_BRACKET if reverse else OPEN_BRACKET
    self.closer = OPEN_BRACKET if reverse else CLOSE_BRACKET

  def parse(self, tokens: Sequence[str]) -> Optional[Node]:
    self._stack: List[Node] = []
    self._root = _Group(0)
    self._groups: List[_Group] = []

    order = range(len(tokens))
    if self.options.direction is Direction.REVERSE:
      order = order[::-1]

    for position, index in enumerate(order):
      token = tokens[index]
      lookahead = tokens[order[position + 1]] if position + 1 < len(order) else None
      self._consume(token, lookahead)

    root = self._finish()
    log_detail(f"Parsed {len(tokens)} tokens as {self.options.notation.value}"
               f"{' (strict)' if self.options.strict else ''}")
    return root

  @property
  def _group(self) -> _Group:
    return self._groups[-1] if self._groups else self._root

  def _fail(self, error: ExpressionParseError):
    log_debug(f"Strict {self.options.notation.value} parse failed: {error.message}")
    raise error

  def _consume(self, token: str, lookahead: Optional[str]):
    spec = lookup_operation(token)
    if spec is not None:
      if self.options.holds_pending:
        self._infix_operation(spec)
      else:
        self._postfix_operation(spec, lookahead)
    elif token in VARIABLE_NAMES:
      self._push(VariableNode(token))
    elif token == self.opener:
      self._groups.append(_Group(len(self._stack)))
    elif token == self.closer:
      if self.options.holds_pending:
        self._close_infix_group()
      else:
        self._close_postfix_group(lookahead)
    else:
      value = parse_number(token)
      if value is not None:
        self._push(ConstantNode(value))
      elif self.options.strict:
        self._fail(UnknownTokenError(token))
      else:
        log_debug(f"Ignoring unknown token {token!r}")

  def _push(self, node: Node):
    self._stack.append(node)
    if self.options.holds_pending:
      self._resolve_ready(self._group)

  def _apply(self, spec: OperationSpec, start: int):
    operands = self._stack[start:]
    del self._stack[start:]
    if self.options.direction is Direction.REVERSE:
      operands.reverse()
    self._stack.append(OperationNode(spec.op_type, *operands))

  def _operands_start(self, spec: OperationSpec, base: int) -> int:
    if is_variadic(spec.op_type):
      return base
    return len(self._stack) - spec.arity

  # Postfix and prefix

  def _postfix_operation(self, spec: OperationSpec, lookahead: Optional[str]):
    if self.options.strict and lookahead != self.closer:
      self._fail(InsufficientOperationsError("operation must close its group"))
    required = minimum_arity(spec.op_type)
    if len(self._stack) - self._group.start < required:
      if self.options.strict:
        self._fail(InsufficientOperandsError(required, spec.name))
      log_warning(f"Ignoring operation {spec.name!r}: need {required} operands in its group")
      return
    self._apply(spec, self._operands_start(spec, self._group.start))

  def _close_postfix_group(self, lookahead: Optional[str]):
    if self.options.strict:
      if not self._stack or not isinstance(self._stack[-1], OperationNode):
        self._fail(InsufficientOperationsError())
      if lookahead == self.closer:
        self._fail(InsufficientOperationsError("near parenthesis"))
      if not self._groups:
        self._fail(UnbalancedParenthesesError())
    if self._groups:
      self._groups.pop()

  # Infix

  def _infix_operation(self, spec: OperationSpec):
    group = self._group
    available = len(self._stack) - group.start
    if not group.pending and available >= minimum_arity(spec.op_type):
      # Operands already read, as in "(1 2 +)" or "x 2 *"
      self._apply(spec, self._operands_start(spec, group.start))
      return
    base = group.start if not group.pending else len(self._stack)
    group.pending.append(_Pending(spec, base))

  def _resolve_ready(self, group: _Group):
    while group.pending:
      spec, base = group.pending[-1]
      if is_variadic(spec.op_type) or len(self._stack) - base < spec.arity:
        return
      group.pending.pop()
      self._apply(spec, len(self._stack) - spec.arity)

  def _flush(self, group: _Group):
    while True:
      self._resolve_ready(group)
      if not group.pending:
        return
      spec, base = group.pending.pop()
      if is_variadic(spec.op_type) and len(self._stack) - base >= 1:
        self._apply(spec, base)
      elif self.options.strict:
        self._fail(InsufficientOperandsError(minimum_arity(spec.op_type), spec.name))
      else:
        log_warning(f"Dropping operation {spec.name!r} without operands")

  def _close_infix_group(self):
    if not self._groups:
      if self.options.strict:
        self._fail(UnbalancedParenthesesError())
      return
    group = self._groups.pop()
    self._flush(group)
    if self.options.strict:
      produced = len(self._stack) - group.start
      if produced != 1 or not isinstance(self._stack[-1], OperationNode):
        self._fail(InsufficientOperationsError())
    self._resolve_ready(self._group)

  def _finish(self) -> Optional[Node]:
    if self.options.strict and self._groups:
      self._fail(UnbalancedParenthesesError())
    if self.options.holds_pending:
      while self._groups:
        self._flush(self._groups.pop())
        self._resolve_ready(self._group)
      self._flush(self._root)
    if self.options.strict and len(self._stack) != 1:
      self._fail(InsufficientOperationsError(f"{len(self._stack)} items left"))
    return self._stack[0] if self._stack else None


def parse(text: str, notation: Notation = Notation.INFIX, strict: bool = False) -> Optional['Expression']:
  """Parse text in the given notation.

  Lenient parsing returns ``None`` when nothing could be built; strict parsing
  raises an ``ExpressionParseError`` subclass describing the first problem.
  """
  from ..expression import Expression
  root = StackParser(ParseOptions(notation=notation, strict=strict)).parse(tokenize(text))
  return Expression(root) if root is not None else None


def parse_infix(text: str, strict: bool = False) -> Optional['Expression']:
  return parse(text, Notation.INFIX, strict)


def parse_postfix(text: str, strict: bool = False) -> Optional['Expression']:
  return parse(text, Notation.POSTFIX, strict)


def parse_prefix(text: str, strict: bool = False) -> Optional['Expression']:
  return parse(text, Notation.PREFIX, strict)
