"""
Dependency graph construction.

The graph is stored in the reverse direction of a plain import graph:
``graph[dep]`` lists the modules that import ``dep``. That orientation is
what the "from" and "why" queries read, so it is kept throughout.

Key presence doubles as the visited set. Every traversed module gets an
entry (possibly empty) before its own imports are explored, which keeps the
traversal finite even if the module set contains an import cycle.
"""

import logging
from dataclasses import dataclass
from typing import AbstractSet, Dict, List, Sequence

from .pattern import is_stdlib
from .resolver import ModuleDescriptor, ModuleResolver

logger = logging.getLogger(__name__)

# Pseudo-package standing for cgo; it has no source to resolve.
CGO_PSEUDO_PACKAGE = "C"

DependencyGraph = Dict[str, List[str]]


@dataclass(frozen=True)
class BuildOptions:
    recursive: bool = False
    include_stdlib: bool = False
    include_test_deps: bool = True


def effective_imports(module: ModuleDescriptor, is_root: bool, options: BuildOptions) -> List[str]:
    """
    Return the import paths of a module that should become graph edges.

    Test and external-test imports are only included for root modules.
    The result is deduplicated, keeping first-seen order.

    Args:
        module: Descriptor of the importing module
        is_root: Whether the module was named directly as a root
        options: Build options

    Returns:
        Import paths, with the cgo pseudo-package and (unless enabled)
        standard library paths removed.
    """
    candidates = list(module.imports)
    if is_root and options.include_test_deps:
        candidates.extend(module.test_imports)
        candidates.extend(module.xtest_imports)

    seen: Dict[str, None] = {}
    for name in candidates:
        if name == CGO_PSEUDO_PACKAGE:
            continue
        if not options.include_stdlib and is_stdlib(name):
            continue
        seen.setdefault(name, None)
    return list(seen)


def find_imports(
    name: str,
    graph: DependencyGraph,
    resolver: ModuleResolver,
    root_set: AbstractSet[str],
    options: BuildOptions,
    base_dir: str,
) -> None:
    """Add the imports of module ``name`` to ``graph``.

    With ``options.recursive`` newly discovered modules are pushed on a
    worklist and explored in turn, so chain depth is not bounded by the
    interpreter stack.
    """
    pending = [name]
    while pending:
        current = pending.pop()
        if current == CGO_PSEUDO_PACKAGE:
            continue
        module = resolver.resolve(current, base_dir)
        # ensure the module has an entry
        graph.setdefault(module.import_path, [])
        logger.debug("resolved %s", module.import_path)

        for dep in effective_imports(module, module.import_path in root_set, options):
            already_done = dep in graph
            graph.setdefault(dep, []).append(module.import_path)
            if options.recursive and not already_done:
                logger.debug("discovered %s (imported by %s)", dep, module.import_path)
                pending.append(dep)


def build_graph(
    roots: Sequence[str],
    resolver: ModuleResolver,
    root_set: AbstractSet[str],
    options: BuildOptions,
    base_dir: str = ".",
) -> DependencyGraph:
    """
    Build the reverse dependency graph reachable from ``roots``.

    Args:
        roots: Module specifiers to start from
        resolver: Resolver used to look up module descriptors
        root_set: Canonical import paths of the root modules
        options: Build options
        base_dir: Directory relative specifiers are resolved from

    Returns:
        Mapping of import path to the import paths of its importers, in
        discovery order (duplicates possible).

    Raises:
        ResolutionError: if any module cannot be resolved; no partial graph
            is returned.
    """
    graph: DependencyGraph = {}
    for root in roots:
        find_imports(root, graph, resolver, root_set, options, base_dir)
    logger.info("Dependency graph has %d node(s)", len(graph))
    return graph
