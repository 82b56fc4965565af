"""Static operation registry.

Built once at import time and never mutated afterwards, so it can be read
from any number of threads. Parsing resolves a token to its ``OpType`` with
``OPERATION_NAMES``; everything else looks records up by ``OpType``.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional
from .operators import (
  OpType, Arity, OPERATION_NAMES, OPERATION_SYMBOLS, OPERATION_ARITY, OPERATION_FUNCTIONS
)
from .derivatives import DIFF_RULES, DiffRule


@dataclass(frozen=True)
class OperationSpec:
  op_type: OpType
  name: str
  arity: Arity
  evaluate: Callable
  diff: DiffRule


OPERATIONS: Mapping[OpType, OperationSpec] = MappingProxyType({
  op_type: OperationSpec(
    op_type=op_type,
    name=OPERATION_SYMBOLS[op_type],
    arity=OPERATION_ARITY[op_type],
    evaluate=OPERATION_FUNCTIONS[op_type],
    diff=DIFF_RULES[op_type],
  )
  for op_type in OpType
})


def lookup_operation(token: str) -> Optional[OperationSpec]:
  op_type = OPERATION_NAMES.get(token)
  return OPERATIONS[op_type] if op_type is not None else None
