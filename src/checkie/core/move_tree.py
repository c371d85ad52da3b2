"""MoveTree — arena of move nodes referenced by index.

Each node records a landing square and the position captured on the way
there (``None`` for the root and for simple steps). Nodes own their child
index lists exclusively; parent links point back by index, so the structure
stays acyclic and cheap to copy or compare.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from checkie.core.types import Position

ROOT = 0


class MoveTree:
    """All legal continuations for one stone, stored in parallel arrays."""

    __slots__ = ("_landings", "_captured", "_parents", "_children")

    def __init__(self, origin: Position) -> None:
        self._landings: list[Position] = [origin]
        self._captured: list[Position | None] = [None]
        self._parents: list[int] = [-1]
        self._children: list[list[int]] = [[]]

    # -- Construction -------------------------------------------------------

    def add(self, parent: int, landing: Position, captured: Position | None) -> int:
        """Append a child of *parent* and return its index."""
        idx = len(self._landings)
        self._landings.append(landing)
        self._captured.append(captured)
        self._parents.append(parent)
        self._children.append([])
        self._children[parent].append(idx)
        return idx

    # -- Index-level access -------------------------------------------------

    def __len__(self) -> int:
        return len(self._landings)

    def landing(self, idx: int) -> Position:
        return self._landings[idx]

    def captured(self, idx: int) -> Position | None:
        return self._captured[idx]

    def parent(self, idx: int) -> int | None:
        p = self._parents[idx]
        return None if p < 0 else p

    def child_indices(self, idx: int) -> tuple[int, ...]:
        return tuple(self._children[idx])

    def captured_along(self, idx: int) -> list[Position]:
        """Captured positions from the root down to *idx*, in play order."""
        captured: list[Position] = []
        while idx > ROOT:
            cap = self._captured[idx]
            if cap is not None:
                captured.append(cap)
            idx = self._parents[idx]
        captured.reverse()
        return captured

    def path_to(self, idx: int) -> list[int]:
        """Node indices from the first ply down to *idx* (root excluded)."""
        path: list[int] = []
        while idx > ROOT:
            path.append(idx)
            idx = self._parents[idx]
        path.reverse()
        return path

    # -- Views --------------------------------------------------------------

    @property
    def origin(self) -> Position:
        return self._landings[ROOT]

    @property
    def root(self) -> MoveTreeNode:
        return MoveTreeNode(self, ROOT)

    def node(self, idx: int) -> MoveTreeNode:
        if not 0 <= idx < len(self._landings):
            raise IndexError(f"No node {idx} in move tree of size {len(self)}")
        return MoveTreeNode(self, idx)

    def iter_nodes(self) -> Iterator[MoveTreeNode]:
        """Depth-first pre-order, root first."""
        stack = [ROOT]
        while stack:
            idx = stack.pop()
            yield MoveTreeNode(self, idx)
            stack.extend(reversed(self._children[idx]))

    def iter_leaves(self) -> Iterator[MoveTreeNode]:
        """Terminal leaves below the root, depth-first."""
        for node in self.iter_nodes():
            if node.index != ROOT and node.is_leaf:
                yield node

    # -- Serialisation ------------------------------------------------------

    def to_dict(self, idx: int = ROOT) -> dict[str, Any]:
        """Nested ``{landing, captured, children}`` dictionaries."""
        cap = self._captured[idx]
        return {
            "landing": tuple(self._landings[idx]),
            "captured": tuple(cap) if cap is not None else None,
            "children": [self.to_dict(child) for child in self._children[idx]],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveTree):
            return NotImplemented
        return (
            self._landings == other._landings
            and self._captured == other._captured
            and self._children == other._children
        )

    def __repr__(self) -> str:
        return f"MoveTree(origin={self.origin}, nodes={len(self)})"


class MoveTreeNode:
    """Read-only view of one node in a :class:`MoveTree`."""

    __slots__ = ("tree", "index")

    def __init__(self, tree: MoveTree, index: int) -> None:
        self.tree = tree
        self.index = index

    @property
    def landing(self) -> Position:
        return self.tree.landing(self.index)

    @property
    def captured(self) -> Position | None:
        return self.tree.captured(self.index)

    @property
    def children(self) -> list[MoveTreeNode]:
        return [MoveTreeNode(self.tree, i) for i in self.tree.child_indices(self.index)]

    @property
    def is_leaf(self) -> bool:
        return not self.tree.child_indices(self.index)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def parent(self) -> MoveTreeNode | None:
        p = self.tree.parent(self.index)
        return None if p is None else MoveTreeNode(self.tree, p)

    def path(self) -> list[MoveTreeNode]:
        """Nodes from the first ply down to this one."""
        return [MoveTreeNode(self.tree, i) for i in self.tree.path_to(self.index)]

    def captured_along(self) -> list[Position]:
        return self.tree.captured_along(self.index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveTreeNode):
            return NotImplemented
        return self.tree is other.tree and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.tree), self.index))

    def __repr__(self) -> str:
        return (
            f"MoveTreeNode(landing={self.landing}, captured={self.captured}, "
            f"children={len(self.tree.child_indices(self.index))})"
        )
