from __future__ import annotations

import logging
from typing import TypeVar

from .base import BLACK, RED, Tree, TreeNode

T = TypeVar("T")

logger = logging.getLogger(__name__)


class _Path(object):
    """The nodes around the current position of a single descent."""

    def __init__(self, header: TreeNode, nil: TreeNode):
        self.current: TreeNode = header
        self.parent: TreeNode = header
        self.grand: TreeNode = header
        self.great: TreeNode = header
        self.sibling: TreeNode = nil

    def descend(self, go_left: bool):
        self.great = self.grand
        self.grand = self.parent
        self.parent = self.current
        if go_left:
            self.current = self.current.left
            self.sibling = self.parent.right
        else:
            self.current = self.current.right
            self.sibling = self.parent.left

    def refresh_sibling(self):
        if self.parent.right is self.current:
            self.sibling = self.parent.left
        else:
            self.sibling = self.parent.right


class OrderedTree(Tree[T]):
    """An ordered set kept balanced by red-black coloring.

    Both insertion and deletion make a single pass down from the root, fixing
    colors and rotating on the way so nothing has to be repaired on the way
    back up.
    """

    def insert(self, item: T):
        """Add `item` to the tree. Inserting a duplicate does nothing."""
        nil = self._nil
        path = _Path(self._header, nil)

        while path.current is not nil:
            c = self._compare(item, path.current)
            if c == 0:
                return

            path.descend(c < 0)

            # Split any node with two red children before passing below it
            if path.current.left.is_red and path.current.right.is_red:
                self._reorient(item, path)

        new_node = TreeNode(item, nil, nil)
        if self._compare(item, path.parent) < 0:
            path.parent.left = new_node
        else:
            path.parent.right = new_node

        path.current = new_node
        self._len += 1
        self._reorient(item, path)

    def _reorient(self, item: T, path: _Path):
        # Color flip:
        cur = path.current
        cur.color = RED
        cur.left.color = BLACK
        cur.right.color = BLACK

        if path.parent.is_red:
            path.grand.color = RED
            if (self._compare(item, path.grand) < 0) != (
                self._compare(item, path.parent) < 0
            ):
                logger.debug("insert %r: double rotation at %r", item, path.grand)
                path.parent = self._rotate(item, path.grand)
            else:
                logger.debug("insert %r: single rotation at %r", item, path.grand)

            path.current = self._rotate(item, path.great)
            path.current.color = BLACK

        self._header.right.color = BLACK

    def remove(self, item: T):
        """Remove `item` from the tree, if present."""
        if self.is_empty() or not self.contains(item):
            return

        nil = self._nil
        self._header.color = RED
        path = _Path(self._header, nil)

        while self._compare(item, path.current) != 0:
            path.descend(self._compare(item, path.current) < 0)

            # A black node under a black parent always has a red sibling
            # here; lift it so the parent turns red.
            if path.current.is_black and path.sibling.is_red:
                self._promote_sibling(path)

            if self._is_double_black(path.current):
                self._resolve_double_black(path)

            self._header.right.color = BLACK
            nil.color = BLACK

        target = path.current
        if self._is_leaf(target):
            if path.parent.left is target:
                path.parent.left = nil
            else:
                path.parent.right = nil
            self._len -= 1
        else:
            if target.right is not nil:
                replacement = self._leftmost(target.right).element
            else:
                replacement = self._rightmost(target.left).element

            logger.debug("remove %r: relabel with neighbour %r", item, replacement)
            self.remove(replacement)
            target.element = replacement

        self._header.color = BLACK
        self._header.right.color = BLACK

    def _promote_sibling(self, path: _Path):
        parent = path.parent
        sibling = path.sibling
        logger.debug("remove: promote red sibling %r over %r", sibling, parent)

        parent.color = RED
        sibling.color = BLACK
        path.grand = self._rotate(sibling.element, path.grand)
        path.refresh_sibling()

    def _resolve_double_black(self, path: _Path):
        """Turn the black node `path.current` red without changing any black
        height. Requires its parent to be red (or the root) and its sibling to
        be black."""
        cur = path.current
        parent = path.parent
        sibling = path.sibling

        if parent.left is sibling:
            outer, inner = sibling.left, sibling.right
        else:
            outer, inner = sibling.right, sibling.left

        if outer.is_red:
            logger.debug("remove: outer red child %r under sibling %r", outer, sibling)
            path.grand = self._rotate(sibling.element, path.grand)
            self._recolor_rotated(path)
        elif inner.is_red:
            logger.debug("remove: inner red child %r under sibling %r", inner, sibling)
            self._rotate(inner.element, parent)
            path.grand = self._rotate(inner.element, path.grand)
            self._recolor_rotated(path)
        else:
            logger.debug("remove: color flip at %r", parent)
            cur.color = RED
            if sibling is not self._nil:
                sibling.color = RED
            parent.color = BLACK

    def _recolor_rotated(self, path: _Path):
        top = path.grand
        top.left.color = BLACK
        top.right.color = BLACK
        top.color = RED
        path.current.color = RED
        path.refresh_sibling()
