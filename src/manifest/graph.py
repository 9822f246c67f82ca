"""Manifest dependency graph - adjacency, cycle detection, ordering.

TIER 2: May import from core, lib.

Only blocks, collections and components dependencies form edges.
External dependencies are third-party references and never affect
ordering.
"""

import heapq
from collections.abc import Iterable

from core.errors import CyclicManifestDependencyError
from core.types import GRAPH_CATEGORIES
from manifest.model import ManifestInfo

_VISITING = 1
_DONE = 2


def build_dependency_graph(
    manifests: Iterable[ManifestInfo], check_cycles: bool = True
) -> dict[str, list[str]]:
    """Build an adjacency list of internal manifest dependencies.

    Args:
        manifests: Loaded manifests.
        check_cycles: Raise if the graph contains a cycle.

    Returns:
        Dict of manifest id -> referenced ids (blocks, collections,
        components, in that order, without repeats).

    Raises:
        CyclicManifestDependencyError: If check_cycles and a cycle exists.
    """
    graph: dict[str, list[str]] = {}

    for manifest in manifests:
        deps: list[str] = []
        for category in GRAPH_CATEGORIES:
            deps.extend(manifest.depends_on(category))
        graph[manifest.id] = list(dict.fromkeys(deps))

    if check_cycles:
        cycle = find_cycle(graph)
        if cycle:
            raise CyclicManifestDependencyError(cycle)

    return graph


def find_cycle(graph: dict[str, list[str]]) -> list[str] | None:
    """Find a dependency cycle.

    Depth-first search from each id in sorted order. References to ids
    outside the graph are leaves.

    Returns:
        Closed cycle path (e.g. ["A", "B", "C", "A"]), or None.
    """
    state: dict[str, int] = {}

    for start in sorted(graph):
        if start in state:
            continue

        state[start] = _VISITING
        path = [start]
        stack = [iter(graph[start])]

        while stack:
            for dep in stack[-1]:
                if dep not in graph:
                    continue
                if state.get(dep) == _VISITING:
                    return path[path.index(dep) :] + [dep]
                if dep not in state:
                    state[dep] = _VISITING
                    path.append(dep)
                    stack.append(iter(graph[dep]))
                    break
            else:
                state[path.pop()] = _DONE
                stack.pop()

    return None


def execution_order(graph: dict[str, list[str]]) -> list[str]:
    """Order manifest ids so dependencies come before dependents.

    Ties are broken by id, so the order is deterministic.

    Raises:
        CyclicManifestDependencyError: If the graph contains a cycle.
    """
    pending = {node: {d for d in deps if d in graph} for node, deps in graph.items()}
    dependents: dict[str, list[str]] = {node: [] for node in graph}
    for node, deps in pending.items():
        for dep in deps:
            dependents[dep].append(node)

    ready = [node for node, deps in pending.items() if not deps]
    heapq.heapify(ready)
    order: list[str] = []

    while ready:
        node = heapq.heappop(ready)
        order.append(node)
        for dependent in dependents[node]:
            pending[dependent].discard(node)
            if not pending[dependent]:
                heapq.heappush(ready, dependent)

    if len(order) < len(graph):
        raise CyclicManifestDependencyError(find_cycle(graph) or sorted(set(graph) - set(order)))

    return order
