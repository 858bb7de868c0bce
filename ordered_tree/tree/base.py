from __future__ import annotations

from collections.abc import Collection
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .iter import TreeIter

T = TypeVar("T")

RED = 0
BLACK = 1


class UnderflowError(IndexError):
    """Raised when the smallest or largest element of an empty tree is
    requested."""


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison built on `<` alone."""
    if a < b:
        return -1
    elif b < a:
        return 1
    return 0


class TreeNode(Generic[T]):
    def __init__(
        self,
        element: Optional[T],
        left: Optional[TreeNode[T]],
        right: Optional[TreeNode[T]],
        color: int = BLACK,
    ):
        self.element: Optional[T] = element
        self.left: Optional[TreeNode[T]] = left
        self.right: Optional[TreeNode[T]] = right
        self.color: int = color

    @property
    def is_red(self) -> bool:
        return self.color == RED

    @property
    def is_black(self) -> bool:
        return self.color == BLACK

    def _rotate_with_left_child(self) -> TreeNode[T]:
        # Right rotation; returns the new subtree root.
        child = self.left
        self.left = child.right
        child.right = self
        return child

    def _rotate_with_right_child(self) -> TreeNode[T]:
        # Left rotation; returns the new subtree root.
        child = self.right
        self.right = child.left
        child.left = self
        return child

    def __repr__(self) -> str:
        return "{}({!r}, {})".format(
            self.__class__.__name__, self.element, "R" if self.is_red else "B"
        )


class Tree(Generic[T], Collection):
    """Binary search tree hung below a header node.

    The real root is always `self._header.right`. Every leaf slot points at a
    single shared sentinel (`self._nil`) which is always BLACK; the header's
    left slot is never used. Subclasses supply `insert` and `remove`.
    """

    def __init__(self, compare: Optional[Callable[[T, T], int]] = None):
        self._cmp: Callable[[T, T], int] = (
            compare if compare is not None else natural_order
        )

        self._nil: TreeNode[T] = TreeNode(None, None, None)
        self._nil.left = self._nil.right = self._nil
        self._header: TreeNode[T] = TreeNode(None, self._nil, self._nil)
        self._len: int = 0

    @property
    def _root(self) -> TreeNode[T]:
        return self._header.right

    def _compare(self, item: T, node: TreeNode[T]) -> int:
        """Compare `item` against `node`'s element, treating the header as
        smaller than everything."""
        if node is self._header:
            return 1
        return self._cmp(item, node.element)

    def _rotate(self, item: T, parent: TreeNode[T]) -> TreeNode[T]:
        """Rotate the child of `parent` lying on `item`'s side with its own
        child on `item`'s side, and reattach the result to `parent`.

        Returns the new root of the rotated subtree.
        """
        if self._compare(item, parent) < 0:
            child = parent.left
            if self._compare(item, child) < 0:
                parent.left = child._rotate_with_left_child()
            else:
                parent.left = child._rotate_with_right_child()
            return parent.left
        else:
            child = parent.right
            if self._compare(item, child) < 0:
                parent.right = child._rotate_with_left_child()
            else:
                parent.right = child._rotate_with_right_child()
            return parent.right

    def _is_double_black(self, node: TreeNode[T]) -> bool:
        return node.is_black and node.left.is_black and node.right.is_black

    def _is_leaf(self, node: TreeNode[T]) -> bool:
        return (
            node is not self._nil
            and node.left is self._nil
            and node.right is self._nil
        )

    def _leftmost(self, node: TreeNode[T]) -> TreeNode[T]:
        while node.left is not self._nil:
            node = node.left
        return node

    def _rightmost(self, node: TreeNode[T]) -> TreeNode[T]:
        while node.right is not self._nil:
            node = node.right
        return node

    def contains(self, item: T) -> bool:
        """Return True if an element comparing equal to `item` is stored."""
        cur = self._root
        while cur is not self._nil:
            c = self._cmp(item, cur.element)
            if c < 0:
                cur = cur.left
            elif c > 0:
                cur = cur.right
            else:
                return True
        return False

    def find_min(self) -> T:
        """Return the smallest element.

        Raises UnderflowError if the tree is empty.
        """
        if self.is_empty():
            raise UnderflowError("Tree is empty")
        return self._leftmost(self._root).element

    def find_max(self) -> T:
        """Return the largest element.

        Raises UnderflowError if the tree is empty.
        """
        if self.is_empty():
            raise UnderflowError("Tree is empty")
        return self._rightmost(self._root).element

    def is_empty(self) -> bool:
        return self._header.right is self._nil

    def make_empty(self):
        """Drop every element in O(1) by detaching the root."""
        self._header.right = self._nil
        self._len = 0

    def insert(self, item: T):
        raise NotImplementedError()

    def remove(self, item: T):
        raise NotImplementedError()

    def __contains__(self, item: T) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[T]:
        return TreeIter(self._root, self._nil, False)

    def __reversed__(self) -> Iterator[T]:
        return TreeIter(self._root, self._nil, True)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return "{}([{}])".format(
            self.__class__.__name__, ", ".join(repr(x) for x in self)
        )
