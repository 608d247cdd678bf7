"""Rendering of the dependency graph into output lines."""

import os
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Mapping, Sequence

from .resolver import ModuleDescriptor, ModuleResolver


@dataclass(frozen=True)
class RenderOptions:
    show_from: bool = False
    show_files: bool = False
    include_test_deps: bool = True


def uniq(names: Sequence[str]) -> List[str]:
    """Drop adjacent duplicates from a sorted sequence."""
    result: List[str] = []
    for name in names:
        if not result or result[-1] != name:
            result.append(name)
    return result


def _file_lines(module: ModuleDescriptor, files: Iterable[str]) -> List[str]:
    return [os.path.join(module.dir, f) for f in files]


def module_files(module: ModuleDescriptor, is_root: bool, include_test_deps: bool) -> List[str]:
    lines = _file_lines(module, module.go_files)
    lines += _file_lines(module, module.cgo_files)
    if is_root and include_test_deps:
        # A module named on the command line: show its test files too.
        lines += _file_lines(module, module.test_go_files)
        lines += _file_lines(module, module.xtest_go_files)
    return lines


def render(
    graph: Mapping[str, List[str]],
    root_set: AbstractSet[str],
    resolver: ModuleResolver,
    options: RenderOptions,
    base_dir: str = ".",
) -> List[str]:
    """
    Render the graph as output lines, one module (or file) per line.

    Files mode takes precedence over "from" mode. The resolver is only
    consulted in files mode.
    """
    lines: List[str] = []
    for name in sorted(graph):
        if options.show_files:
            module = resolver.resolve(name, base_dir)
            lines.extend(module_files(module, module.import_path in root_set, options.include_test_deps))
        elif options.show_from:
            importers = uniq(sorted(graph[name]))
            lines.append(f"{name} {' '.join(importers)}")
        else:
            lines.append(name)
    return lines
