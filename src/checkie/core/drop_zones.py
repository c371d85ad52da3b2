"""Drop-zone reduction: move tree → squares the stone may be dropped on.

A stone that can capture must keep capturing until its chain is exhausted,
so once the root has a capturing child only terminal capture leaves are
legal stopping points. Without captures the legal drops are the first-ply
simple steps.
"""

from __future__ import annotations

from checkie.core.move_tree import MoveTree, MoveTreeNode
from checkie.core.types import Position


def _as_node(tree: MoveTree | MoveTreeNode) -> MoveTreeNode:
    return tree.root if isinstance(tree, MoveTree) else tree


def has_capture(tree: MoveTree | MoveTreeNode) -> bool:
    """Whether the root has at least one capturing child."""
    return any(child.is_capture for child in _as_node(tree).children)


def drop_nodes(
    tree: MoveTree | MoveTreeNode, min_captures: int = 0
) -> list[MoveTreeNode]:
    """Nodes at which the move may legally end, in depth-first order.

    With *min_captures* set, capture leaves whose chain is shorter are
    dropped as well.
    """
    root = _as_node(tree)
    children = root.children
    if not any(child.is_capture for child in children):
        return children if min_captures == 0 else []

    leaves: list[MoveTreeNode] = []
    stack = [child for child in reversed(children) if child.is_capture]
    while stack:
        node = stack.pop()
        below = node.children
        if not below:
            if len(node.captured_along()) >= min_captures:
                leaves.append(node)
            continue
        stack.extend(reversed(below))
    return leaves


def max_captures(tree: MoveTree | MoveTreeNode) -> int:
    """Length of the longest capture chain available to the stone."""
    return max((len(node.captured_along()) for node in drop_nodes(tree)), default=0)


def drop_zones(
    tree: MoveTree | MoveTreeNode, min_captures: int = 0
) -> tuple[Position, ...]:
    """Distinct legal destination squares, in first-seen order."""
    seen: dict[Position, None] = {}
    for node in drop_nodes(tree, min_captures):
        seen.setdefault(node.landing, None)
    return tuple(seen)
