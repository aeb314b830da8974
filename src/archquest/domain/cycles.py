"""
Cycle detection over the connection graph.

Depth-first search with a visited set and a recursion-stack set. Roots are
visited in block registration order and adjacency follows connection
insertion order, so results are reproducible.

Coverage policy: only the FIRST cycle found from each unvisited root is
reported. This is not a complete simple-cycle enumeration; it guarantees at
least one cycle per strongly-connected component touched by a fresh root.
Scores depend on the number of reported cycles, so do not "improve" this
into full enumeration.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from archquest.domain.models import Connection

if TYPE_CHECKING:
    from archquest.domain.layer_structure import LayerStructure


def build_adjacency(connections: Iterable[Connection]) -> dict[str, list[str]]:
    """Map each source block id to its targets, in insertion order."""
    adjacency: dict[str, list[str]] = {}
    for connection in connections:
        adjacency.setdefault(connection.source, []).append(connection.target)
    return adjacency


def _first_cycle_from(
    root: str,
    adjacency: dict[str, list[str]],
    visited: set[str],
) -> list[str] | None:
    """Iterative DFS from ``root``; returns the first cycle closed, if any.

    Uses an explicit stack of (node, neighbor_iterator) frames so deep
    dependency chains never hit Python's recursion limit.
    """
    path: list[str] = [root]
    on_stack: set[str] = {root}
    visited.add(root)
    frames = [(root, iter(adjacency.get(root, [])))]

    while frames:
        node, neighbors = frames[-1]
        descended = False
        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                on_stack.add(neighbor)
                path.append(neighbor)
                frames.append((neighbor, iter(adjacency.get(neighbor, []))))
                descended = True
                break
            if neighbor in on_stack:
                start = path.index(neighbor)
                return path[start:] + [neighbor]

        if not descended:
            frames.pop()
            on_stack.discard(node)
            path.pop()

    return None


def find_cycles(
    block_ids: Iterable[str], connections: Iterable[Connection]
) -> list[list[str]]:
    """
    Find cycles reachable from the given roots.

    Args:
        block_ids: Candidate DFS roots, in registration order
        connections: Directed connections, in insertion order

    Returns:
        One path per reported cycle, starting and ending at the node where
        the cycle was closed: ``[A, B, C, A]``, or ``[X, X]`` for a self-loop.
    """
    adjacency = build_adjacency(connections)
    visited: set[str] = set()
    cycles: list[list[str]] = []

    for root in block_ids:
        if root in visited:
            continue
        cycle = _first_cycle_from(root, adjacency, visited)
        if cycle is not None and cycle not in cycles:
            cycles.append(cycle)

    return cycles


class CycleDetector:
    """Runs cycle detection against a LayerStructure."""

    def detect(self, structure: "LayerStructure") -> list[list[str]]:
        return find_cycles(
            (placement.block.block_id for placement in structure.get_all_blocks()),
            structure.get_connections(),
        )

    def has_cycle(self, structure: "LayerStructure") -> bool:
        return bool(self.detect(structure))
