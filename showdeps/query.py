"""
The showdeps query pipeline: expand roots, build, filter, render.

All toggles travel in a QueryOptions value; nothing is kept at module level.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Set

from .ancestors import filter_graph, mark_ancestors
from .formatter import RenderOptions, render
from .graph_builder import BuildOptions, build_graph
from .pattern import is_stdlib, match_pattern
from .resolver import ModuleResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryOptions:
    no_test_deps: bool = False
    all: bool = False
    stdlib: bool = False
    show_from: bool = False
    why: Optional[str] = None
    files: bool = False

    def effective(self) -> "QueryOptions":
        """Apply the implications of ``why``.

        ``why`` implies ``all`` and ``show_from``, and also ``stdlib`` when
        the pattern names a standard library package.
        """
        if not self.why:
            return self
        return replace(
            self,
            all=True,
            show_from=True,
            stdlib=self.stdlib or is_stdlib(self.why),
        )

    def build_options(self) -> BuildOptions:
        return BuildOptions(
            recursive=self.all,
            include_stdlib=self.stdlib,
            include_test_deps=not self.no_test_deps,
        )

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            show_from=self.show_from,
            show_files=self.files,
            include_test_deps=not self.no_test_deps,
        )


def resolve_roots(roots: Sequence[str], resolver: ModuleResolver, base_dir: str) -> Set[str]:
    """Return the canonical import paths of the root modules."""
    root_set: Set[str] = set()
    for root in roots:
        root_set.add(resolver.resolve(root, base_dir).import_path)
    return root_set


def run_query(
    args: Sequence[str],
    resolver: ModuleResolver,
    options: QueryOptions,
    base_dir: Optional[str] = None,
) -> List[str]:
    """
    Run one dependency query and return the output lines.

    Args:
        args: Module specifiers as given by the user (may use ``...``);
            empty means the module in ``base_dir``
        resolver: Module resolver and root expander
        options: Query toggles
        base_dir: Directory relative specifiers are resolved from
            (defaults to the current working directory)

    Raises:
        ResolutionError: if a root or any traversed module cannot be found
    """
    base_dir = base_dir or os.getcwd()
    options = options.effective()

    roots = resolver.expand(list(args) or ["."], base_dir)
    root_set = resolve_roots(roots, resolver, base_dir)
    logger.info("Roots: %s", ", ".join(sorted(root_set)))

    graph = build_graph(roots, resolver, root_set, options.build_options(), base_dir)

    if not options.files:
        # Modules named as roots are not reported as their own dependencies.
        for name in root_set:
            graph.pop(name, None)
        if options.why:
            marked = mark_ancestors(graph, match_pattern(options.why))
            graph = filter_graph(graph, marked)

    return render(graph, root_set, resolver, options.render_options(), base_dir)
