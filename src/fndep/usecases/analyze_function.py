"""Analyze function use-case."""

from __future__ import annotations

import logging
from typing import Dict, List

from fndep.cache import FunctionCache
from fndep.domain.models import (
    AnalysisResult,
    AnalysisStats,
    DependencyGraph,
    FileGroupEntry,
    SortedFunction,
)
from fndep.graph.topo_sort import dependency_edges, topological_sort
from fndep.graph.tree_builder import DEFAULT_MAX_DEPTH, build_tree

logger = logging.getLogger(__name__)


def analyze_function(
    cache: FunctionCache,
    root_name: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> AnalysisResult:
    graph = build_tree(cache, root_name, max_depth=max_depth)
    stats = AnalysisStats(
        files_processed=cache.files_processed,
        functions_found=cache.functions_found,
        dependencies_found=len(graph),
    )
    root = graph[root_name]
    if root.is_stub:
        logger.info("Function %s not found", root_name)
        return AnalysisResult(
            root_function=root_name,
            found=False,
            graph=graph,
            sorted_functions=[],
            not_found=_not_found(graph),
            file_groups={},
            stats=stats,
        )

    edges = dependency_edges(graph)
    ordered = topological_sort(edges)

    sorted_functions: List[SortedFunction] = []
    file_groups: Dict[str, List[FileGroupEntry]] = {}
    for name in ordered:
        node = graph[name]
        is_root = name == root_name
        sorted_functions.append(
            SortedFunction(
                name=name,
                file=node.source_location,
                body=node.body,
                calls=list(node.calls),
                is_root=is_root,
            )
        )
        file_groups.setdefault(node.source_location, []).append(
            FileGroupEntry(name=name, is_root=is_root, calls=list(edges[name]))
        )

    return AnalysisResult(
        root_function=root_name,
        found=True,
        graph=graph,
        sorted_functions=sorted_functions,
        not_found=_not_found(graph),
        unresolved_calls=_unresolved_calls(graph, cache),
        file_groups=file_groups,
        stats=stats,
    )


def _not_found(graph: DependencyGraph) -> List[str]:
    return [name for name, node in graph.items() if node.is_stub]


def _unresolved_calls(graph: DependencyGraph, cache: FunctionCache) -> List[str]:
    seen = set()
    unresolved: List[str] = []
    for node in graph.values():
        for call in node.calls:
            if call in seen or cache.has(call):
                continue
            seen.add(call)
            unresolved.append(call)
    return unresolved
