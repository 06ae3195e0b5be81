"""Binary trees: construction, search and traversal."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def bst_insert(root: TreeNode | None, key: Any) -> TreeNode:
    """Insert a key into a binary search tree and return its root.

    A key that is already present leaves the tree unchanged.
    """
    new = TreeNode(key)
    if root is None:
        return new
    node = root
    while True:
        if key < node.value:
            if node.left is None:
                node.left = new
                break
            node = node.left
        elif key > node.value:
            if node.right is None:
                node.right = new
                break
            node = node.right
        else:
            break
    return root


def insert_level_order(root: TreeNode | None, value: Any) -> TreeNode:
    """Put a value in the first free child slot in level order; return the root."""
    if root is None:
        return TreeNode(value)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = TreeNode(value)
            return root
        queue.append(node.left)
        if node.right is None:
            node.right = TreeNode(value)
            return root
        queue.append(node.right)
    return root


def build_from_preorder_inorder(
    preorder: Iterable[Any], inorder: Iterable[Any]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its preorder and inorder walks."""
    pre = list(preorder)
    ino = list(inorder)
    if len(pre) != len(ino):
        raise ValueError("traversals must have the same length")
    positions = {value: index for index, value in enumerate(ino)}
    if len(positions) != len(ino):
        raise ValueError("values must be distinct")
    values = iter(pre)

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        value = next(values)
        index = positions.get(value)
        if index is None or not start <= index <= end:
            raise ValueError("traversals do not describe the same tree")
        node = TreeNode(value)
        node.left = build(start, index - 1)
        node.right = build(index + 1, end)
        return node

    return build(0, len(ino) - 1)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: TreeNode | None) -> list:
    """Values in left, root, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list:
    """Values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list:
    """Values in left, right, root order."""
    return list(_postorder(root))


def kth_smallest(root: TreeNode | None, k: int) -> Any:
    """The k-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for value in islice(_inorder(root), k - 1, None):
        return value
    raise ValueError("k is larger than the number of nodes")


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def level_order(root: TreeNode | None) -> list:
    """Values level by level, left to right."""
    values = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return values


def lowest_common_ancestor(
    root: TreeNode | None, n1: Any, n2: Any
) -> TreeNode | None:
    """Lowest common ancestor of two values in a binary search tree."""
    node = root
    while node is not None:
        if node.value > n1 and node.value > n2:
            node = node.left
        elif node.value < n1 and node.value < n2:
            node = node.right
        else:
            return node
    return None


def has_path_sum(root: TreeNode | None, total: int) -> bool:
    """Whether some path from the root down to a missing child sums to total."""
    if root is None:
        return total == 0
    remaining = total - root.value
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def _mirrors(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return (
        a.value == b.value and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is its own mirror image."""
    return _mirrors(root, root)


def top_view(root: TreeNode | None) -> dict[int, Any]:
    """Value seen from above at each horizontal distance, ordered left to right."""
    seen: dict[int, Any] = {}
    queue: deque[tuple[int, TreeNode | None]] = deque([(0, root)])
    while queue:
        distance, node = queue.popleft()
        if node is None:
            continue
        seen.setdefault(distance, node.value)
        queue.append((distance + 1, node.right))
        queue.append((distance - 1, node.left))
    return dict(sorted(seen.items()))