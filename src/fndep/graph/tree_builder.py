"""Breadth-first dependency expansion from a root function."""

from __future__ import annotations

import logging
from typing import List, Set

from fndep.domain.models import DependencyGraph, DependencyNode
from fndep.domain.ports import FunctionLookupPort
from fndep.extract.call_extractor import extract_calls

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10


def build_tree(
    cache: FunctionLookupPort,
    root_name: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> DependencyGraph:
    """Expand calls level by level, at most ``max_depth`` levels deep.

    Names that cannot be resolved become stub nodes and are not expanded. A
    stub root means the root function was not found.

    Raises ``ValueError`` when ``max_depth`` is below 1. Config, CLI and REST
    inputs are validated with ``ge=1`` first, so only direct calls reach it.
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")

    tree: DependencyGraph = {}
    frontier: List[str] = [root_name]
    processed: Set[str] = set()
    depth = 0

    logger.debug("Building dependency tree for %s", root_name)
    while frontier and depth < max_depth:
        current = frontier
        frontier = []
        depth += 1
        logger.debug("Level %d: processing %d functions", depth, len(current))

        for name in current:
            if name in processed:
                continue
            processed.add(name)

            record = cache.get(name)
            if record is None:
                tree[name] = DependencyNode(name=name)
                logger.debug("%s not found in cache", name)
                continue

            calls = extract_calls(record.body)
            tree[name] = DependencyNode(
                name=name,
                source_location=record.source_location,
                body=record.body,
                calls=calls,
            )
            logger.debug("%s -> %d calls: %s", name, len(calls), ", ".join(calls))

            for call in calls:
                if call in processed or call in frontier:
                    continue
                if cache.has(call):
                    frontier.append(call)

    if frontier:
        logger.debug("Depth bound %d reached with %d names unexpanded", max_depth, len(frontier))
    logger.info("Tree for %s built with %d functions", root_name, len(tree))
    return tree
