"""An unbalanced binary search tree keyed by comparable values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class KeyValue:
    """A key together with the value stored for it."""

    key: Any
    value: Any


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None

    def pair(self) -> KeyValue:
        return KeyValue(self.key, self.value)


def _leftmost(node: Optional[_Node]) -> Optional[_Node]:
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Optional[_Node]) -> Optional[_Node]:
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


class BinaryTree:
    """Binary search tree; keys are ordered with ``<`` and ``==``.

    ``add`` replaces the value of an existing key, while ``add_recursive``
    always inserts, sending equal keys to the right subtree.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def add(self, key: Any, value: Any) -> None:
        """Insert ``key``, or replace its value if it is already present."""
        if self._root is None:
            self._root = _Node(key, value)
            return
        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = _Node(key, value)
                    return
                current = current.left
            elif key == current.key:
                current.value = value
                return
            else:
                if current.right is None:
                    current.right = _Node(key, value)
                    return
                current = current.right

    def add_recursive(self, key: Any, value: Any) -> None:
        """Insert ``key`` without checking for duplicates; equal keys go right."""

        def insert(node: Optional[_Node]) -> _Node:
            if node is None:
                return _Node(key, value)
            if key < node.key:
                node.left = insert(node.left)
            else:
                node.right = insert(node.right)
            return node

        self._root = insert(self._root)

    def is_empty(self) -> bool:
        """True when the tree holds no keys."""
        return self._root is None

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored for ``key``, or ``default``."""
        current = self._root
        while current is not None:
            if key == current.key:
                return current.value
            current = current.left if key < current.key else current.right
        return default

    def remove(self, key: Any) -> None:
        """Remove ``key`` from the tree; a missing key is ignored."""
        parent: Optional[_Node] = None
        current = self._root
        while current is not None and key != current.key:
            parent = current
            current = current.left if key < current.key else current.right
        if current is None:
            return
        self._unlink(current, parent)

    def _unlink(self, node: _Node, parent: Optional[_Node]) -> None:
        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.key, node.value = succ.key, succ.value
            self._unlink(succ, succ_parent)
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def min(self) -> Optional[KeyValue]:
        """The pair with the smallest key, or ``None`` if the tree is empty."""
        node = _leftmost(self._root)
        return None if node is None else node.pair()

    def max(self) -> Optional[KeyValue]:
        """The pair with the largest key, or ``None`` if the tree is empty."""
        node = _rightmost(self._root)
        return None if node is None else node.pair()

    def pop_min(self) -> Optional[KeyValue]:
        """Remove and return the smallest pair, or ``None`` if empty."""
        smallest = self.min()
        if smallest is not None:
            self.remove(smallest.key)
        return smallest

    def pop_max(self) -> Optional[KeyValue]:
        """Remove and return the largest pair, or ``None`` if empty."""
        largest = self.max()
        if largest is not None:
            self.remove(largest.key)
        return largest

    def format(self) -> str:
        """Nested ``(key, left, right)`` form, with ``NULL`` for empty subtrees."""

        def render(node: Optional[_Node]) -> str:
            if node is None:
                return "NULL"
            return f"({node.key}, {render(node.left)}, {render(node.right)})"

        return render(self._root)

    def inorder(self) -> list[KeyValue]:
        """Pairs in ascending key order, walked with an explicit stack."""
        result: list[KeyValue] = []
        stack: list[_Node] = []
        current = self._root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.pair())
            current = current.right
        return result

    def preorder(self) -> list[KeyValue]:
        """Node, then left subtree, then right subtree, walked with a stack."""
        result: list[KeyValue] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.pair())
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[KeyValue]:
        """Left subtree, right subtree, then node, walked with two stacks."""
        pending = [self._root] if self._root is not None else []
        visited: list[_Node] = []
        while pending:
            node = pending.pop()
            visited.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return [node.pair() for node in reversed(visited)]

    def levelorder(self) -> list[KeyValue]:
        """Pairs level by level, left to right."""
        result: list[KeyValue] = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.pair())
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def inorder_recursive(self) -> list[KeyValue]:
        """Same order as :meth:`inorder`, computed recursively."""

        def walk(node: Optional[_Node]) -> Iterator[KeyValue]:
            if node is not None:
                yield from walk(node.left)
                yield node.pair()
                yield from walk(node.right)

        return list(walk(self._root))

    def preorder_recursive(self) -> list[KeyValue]:
        """Same order as :meth:`preorder`, computed recursively."""

        def walk(node: Optional[_Node]) -> Iterator[KeyValue]:
            if node is not None:
                yield node.pair()
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self._root))

    def postorder_recursive(self) -> list[KeyValue]:
        """Same order as :meth:`postorder`, computed recursively."""

        def walk(node: Optional[_Node]) -> Iterator[KeyValue]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.pair()

        return list(walk(self._root))