"""
Dependency analyzer for Go-style module graphs: lists the packages that a set
of root packages depends on, who introduced each dependency, and which
packages depend on a given target.
"""

from .ancestors import filter_graph, mark_ancestors
from .errors import ConfigError, PatternError, ResolutionError, ShowdepsError
from .formatter import RenderOptions, render
from .graph_builder import BuildOptions, build_graph
from .pattern import is_stdlib, match_pattern
from .query import QueryOptions, run_query
from .resolver import GoListResolver, IndexResolver, ModuleDescriptor, ModuleResolver, load_module_index


__all__ = [
    'BuildOptions',
    'ConfigError',
    'GoListResolver',
    'IndexResolver',
    'ModuleDescriptor',
    'ModuleResolver',
    'PatternError',
    'QueryOptions',
    'RenderOptions',
    'ResolutionError',
    'ShowdepsError',
    'build_graph',
    'filter_graph',
    'is_stdlib',
    'load_module_index',
    'mark_ancestors',
    'match_pattern',
    'render',
    'run_query',
]
