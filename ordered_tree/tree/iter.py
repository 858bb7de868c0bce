from __future__ import annotations

from typing import List

from . import base


class TreeIter(object):
    """In-order walk over the elements below `root`.

    The walk keeps its own stack of pending ancestors, so it is lazy and each
    new instance starts over from whatever `root` it is given.
    """

    def __init__(self, root: base.TreeNode, nil: base.TreeNode, rev: bool):
        self._rev: bool = rev
        self._root: base.TreeNode = root
        self._nil: base.TreeNode = nil
        self._stack: List[base.TreeNode] = []

        self._push_spine(root)

    def _push_spine(self, node: base.TreeNode):
        while node is not self._nil:
            self._stack.append(node)
            if not self._rev:
                node = node.left
            else:
                node = node.right

    def __iter__(self) -> TreeIter:
        return self

    def __reversed__(self) -> TreeIter:
        return TreeIter(self._root, self._nil, not self._rev)

    def __next__(self):
        if len(self._stack) == 0:
            raise StopIteration()

        cur_node = self._stack.pop()

        if not self._rev:
            self._push_spine(cur_node.right)
        else:
            self._push_spine(cur_node.left)

        return cur_node.element
