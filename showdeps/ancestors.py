"""Ancestor closure over the reverse dependency graph (the "why" query)."""

import logging
from typing import Callable, Dict, List, Mapping, Set

logger = logging.getLogger(__name__)


def mark_importers(name: str, graph: Mapping[str, List[str]], marked: Set[str]) -> None:
    """Mark ``name`` and, transitively, every module that imports it."""
    pending = [name]
    while pending:
        current = pending.pop()
        if current in marked:
            continue
        marked.add(current)
        pending.extend(graph.get(current, ()))


def mark_ancestors(graph: Mapping[str, List[str]], is_target: Callable[[str], bool]) -> Set[str]:
    """
    Collect the modules that directly or indirectly import a target.

    Args:
        graph: Reverse dependency graph (module -> importers)
        is_target: Predicate selecting the target modules

    Returns:
        The matching modules plus all their transitive importers.
    """
    marked: Set[str] = set()
    for name in graph:
        if is_target(name):
            mark_importers(name, graph, marked)
    logger.info("Marked %d module(s) depending on the target", len(marked))
    return marked


def filter_graph(graph: Mapping[str, List[str]], marked: Set[str]) -> Dict[str, List[str]]:
    """Return a copy of ``graph`` restricted to the keys in ``marked``."""
    return {name: importers for name, importers in graph.items() if name in marked}
