"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_variables, get_constants,
    get_operations, count_operations
)
from .sympy_utils import (
    to_sympy_expression, sympy_derivative, numeric_derivative,
    derivative_matches, sympy_values, describe
)

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'get_variables', 'get_constants',
    'get_operations', 'count_operations',
    'to_sympy_expression', 'sympy_derivative', 'numeric_derivative',
    'derivative_matches', 'sympy_values', 'describe'
]
