"""
Tree Utility Functions

Traversal and analysis helpers for expression trees.
"""

from collections import Counter
from typing import Dict, List, Set

from ..core.node import Node, ConstantNode, VariableNode, OperationNode
from ..core.operators import OpType


def _children(node: Node):
    return node.operands if isinstance(node, OperationNode) else ()


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = [node]
    all_nodes = []
    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)
        all_nodes.append(current_node)
        nodes_to_visit.extend(_children(current_node))
    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order: a node comes before its operands, operands left to right"""
    nodes = []
    stack = [node]
    while stack:
        current_node = stack.pop()
        nodes.append(current_node)
        stack.extend(reversed(_children(current_node)))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, OperationNode) and node.operands:
        return 1 + max(calculate_tree_depth(operand) for operand in node.operands)
    return 1


def get_variables(node: Node) -> Set[str]:
    return {n.name for n in get_all_nodes(node) if isinstance(n, VariableNode)}


def get_constants(node: Node) -> List[ConstantNode]:
    """Constant leaves in left-to-right order"""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, ConstantNode)]


def get_operations(node: Node) -> List[OperationNode]:
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, OperationNode)]


def count_operations(node: Node) -> Dict[OpType, int]:
    return dict(Counter(n.op_type for n in get_operations(node)))
