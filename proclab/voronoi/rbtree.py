"""Intrusive red-black tree with in-order neighbour links.

Nodes carry ``previous``/``next`` links in addition to the usual tree
pointers, so callers can walk the ordered sequence without searching.
Placement is positional: a successor is always inserted directly after
a given node (or at the very front when no node is given).
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar


class RBNode:
    """Base for objects stored in an :class:`RBTree`."""

    def __init__(self) -> None:
        self.parent: Optional[RBNode] = None
        self.previous: Optional[RBNode] = None
        self.next: Optional[RBNode] = None
        self.left: Optional[RBNode] = None
        self.right: Optional[RBNode] = None
        self.red: bool = False


N = TypeVar("N", bound=RBNode)


def _is_red(node: Optional[RBNode]) -> bool:
    return node is not None and node.red


class RBTree(Generic[N]):
    """A red-black tree ordered by insertion position."""

    def __init__(self) -> None:
        self.root: Optional[N] = None

    def first(self) -> Optional[N]:
        """Return the left-most node, or None for an empty tree."""
        if self.root is None:
            return None
        return self._leftmost(self.root)

    def __iter__(self) -> Iterator[N]:
        node = self.first()
        while node is not None:
            yield node
            node = node.next

    def insert(self, node: Optional[N], successor: N) -> None:
        """Insert ``successor`` right after ``node``; at the front if ``node`` is None."""
        if node is not None:
            successor.previous = node
            successor.next = node.next
            if node.next is not None:
                node.next.previous = successor
            node.next = successor
            if node.right is not None:
                node = self._leftmost(node.right)
                node.left = successor
            else:
                node.right = successor
            parent = node
        elif self.root is not None:
            node = self._leftmost(self.root)
            successor.previous = None
            successor.next = node
            node.previous = successor
            node.left = successor
            parent = node
        else:
            successor.previous = None
            successor.next = None
            self.root = successor
            parent = None

        successor.left = None
        successor.right = None
        successor.parent = parent
        successor.red = True

        node = successor
        while parent is not None and parent.red:
            grandpa = parent.parent
            if parent is grandpa.left:
                uncle = grandpa.right
                if _is_red(uncle):
                    parent.red = False
                    uncle.red = False
                    grandpa.red = True
                    node = grandpa
                else:
                    if node is parent.right:
                        self._rotate_left(parent)
                        node = parent
                        parent = node.parent
                    parent.red = False
                    grandpa.red = True
                    self._rotate_right(grandpa)
            else:
                uncle = grandpa.left
                if _is_red(uncle):
                    parent.red = False
                    uncle.red = False
                    grandpa.red = True
                    node = grandpa
                else:
                    if node is parent.left:
                        self._rotate_right(parent)
                        node = parent
                        parent = node.parent
                    parent.red = False
                    grandpa.red = True
                    self._rotate_left(grandpa)
            parent = node.parent
        self.root.red = False

    def remove(self, node: N) -> None:
        """Unlink ``node`` from the tree and from its neighbours."""
        if node.next is not None:
            node.next.previous = node.previous
        if node.previous is not None:
            node.previous.next = node.next
        node.next = None
        node.previous = None

        parent = node.parent
        left = node.left
        right = node.right
        if left is None:
            replacement = right
        elif right is None:
            replacement = left
        else:
            replacement = self._leftmost(right)

        if parent is not None:
            if parent.left is node:
                parent.left = replacement
            else:
                parent.right = replacement
        else:
            self.root = replacement

        if left is not None and right is not None:
            was_red = replacement.red
            replacement.red = node.red
            replacement.left = left
            left.parent = replacement
            if replacement is not right:
                parent = replacement.parent
                replacement.parent = node.parent
                node = replacement.right
                parent.left = node
                replacement.right = right
                right.parent = replacement
            else:
                replacement.parent = parent
                parent = replacement
                node = replacement.right
        else:
            was_red = node.red
            node = replacement

        # 'node' is now the sole child of the moved successor and
        # 'parent' its new parent.
        if node is not None:
            node.parent = parent
        if was_red:
            return
        if _is_red(node):
            node.red = False
            return

        while node is not self.root:
            if node is parent.left:
                sibling = parent.right
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    sibling = parent.right
                if _is_red(sibling.left) or _is_red(sibling.right):
                    if not _is_red(sibling.right):
                        sibling.left.red = False
                        sibling.red = True
                        self._rotate_right(sibling)
                        sibling = parent.right
                    sibling.red = parent.red
                    parent.red = False
                    sibling.right.red = False
                    self._rotate_left(parent)
                    node = self.root
                    break
            else:
                sibling = parent.left
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    sibling = parent.left
                if _is_red(sibling.left) or _is_red(sibling.right):
                    if not _is_red(sibling.left):
                        sibling.right.red = False
                        sibling.red = True
                        self._rotate_left(sibling)
                        sibling = parent.left
                    sibling.red = parent.red
                    parent.red = False
                    sibling.left.red = False
                    self._rotate_right(parent)
                    node = self.root
                    break
            sibling.red = True
            node = parent
            parent = parent.parent
            if node.red:
                break

        if node is not None:
            node.red = False

    def _rotate_left(self, p: N) -> None:
        q = p.right
        parent = p.parent
        if parent is not None:
            if parent.left is p:
                parent.left = q
            else:
                parent.right = q
        else:
            self.root = q
        q.parent = parent
        p.parent = q
        p.right = q.left
        if p.right is not None:
            p.right.parent = p
        q.left = p

    def _rotate_right(self, p: N) -> None:
        q = p.left
        parent = p.parent
        if parent is not None:
            if parent.left is p:
                parent.left = q
            else:
                parent.right = q
        else:
            self.root = q
        q.parent = parent
        p.parent = q
        p.left = q.right
        if p.left is not None:
            p.left.parent = p
        q.right = p

    @staticmethod
    def _leftmost(node: N) -> N:
        while node.left is not None:
            node = node.left
        return node