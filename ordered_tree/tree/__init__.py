from .base import Tree, TreeNode, UnderflowError, RED, BLACK, natural_order
from .rb import OrderedTree

__all__ = [
    "Tree",
    "TreeNode",
    "OrderedTree",
    "UnderflowError",
    "RED",
    "BLACK",
    "natural_order",
]
