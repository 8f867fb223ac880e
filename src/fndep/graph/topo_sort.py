"""Cycle-tolerant leaves-first ordering."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence

from fndep.domain.models import DependencyGraph

logger = logging.getLogger(__name__)

_IN_PROGRESS = 1
_DONE = 2


def dependency_edges(graph: DependencyGraph) -> Dict[str, List[str]]:
    """Edges between resolved nodes only, in call order; calls to stubs or unknown names are dropped."""
    resolved = {name for name, node in graph.items() if node.body is not None}
    edges: Dict[str, List[str]] = {}
    for name, node in graph.items():
        if name not in resolved:
            continue
        edges[name] = [call for call in node.calls if call in resolved]
    return edges


def topological_sort(dependencies: Mapping[str, Sequence[str]]) -> List[str]:
    """Order names so that callees precede callers.

    Callees are visited in the order listed. A name reached again while
    still on the traversal path closes a cycle; the traversal stops there,
    so every name is emitted exactly once.
    """
    result: List[str] = []
    state: Dict[str, int] = {}

    def visit(name: str) -> None:
        mark = state.get(name)
        if mark == _IN_PROGRESS:
            logger.debug("Cycle detected at %s", name)
            return
        if mark == _DONE:
            return
        state[name] = _IN_PROGRESS
        for target in dependencies.get(name, ()):
            if target in dependencies:
                visit(target)
        state[name] = _DONE
        result.append(name)

    for name in dependencies:
        if name not in state:
            visit(name)
    return result
