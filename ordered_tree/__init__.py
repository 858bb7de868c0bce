from . import tree

from .tree import (
    Tree,
    TreeNode,
    OrderedTree,
    UnderflowError,
    RED,
    BLACK,
    natural_order,
)

__all__ = [
    "Tree",
    "TreeNode",
    "OrderedTree",
    "UnderflowError",
    "RED",
    "BLACK",
    "natural_order",
]
