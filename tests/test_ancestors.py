import sys

from showdeps.ancestors import filter_graph, mark_ancestors, mark_importers
from showdeps.pattern import match_pattern


def test_chain_closure():
    graph = {"X": ["A"], "A": ["B"], "B": []}
    assert mark_ancestors(graph, lambda name: name == "X") == {"X", "A", "B"}


def test_no_match_gives_empty_graph():
    graph = {"X": ["A"], "A": ["B"], "B": []}
    marked = mark_ancestors(graph, lambda name: False)
    assert marked == set()
    assert filter_graph(graph, marked) == {}


def test_only_ancestors_are_marked():
    graph = {
        "d": ["b", "c"],
        "b": ["a"],
        "c": ["r"],
        "a": ["r"],
        "e": ["a"],
    }
    marked = mark_ancestors(graph, lambda name: name == "b")
    assert marked == {"b", "a", "r"}
    assert filter_graph(graph, marked) == {"b": ["a"], "a": ["r"]}


def test_importers_outside_keys_are_marked():
    # Roots are removed from the keys before marking but still appear
    # as importers.
    marked = mark_ancestors({"x": ["root"]}, match_pattern("x"))
    assert marked == {"x", "root"}


def test_cycle_is_safe():
    graph = {"p": ["q"], "q": ["p"]}
    assert mark_ancestors(graph, lambda name: name == "p") == {"p", "q"}


def test_mark_importers_skips_marked():
    marked = {"a"}
    mark_importers("a", {"a": ["b"]}, marked)
    assert marked == {"a"}


def test_wildcard_target():
    graph = {"example.com/t/sub": ["m"], "example.com/t": ["n"], "other": ["o"]}
    marked = mark_ancestors(graph, match_pattern("example.com/t/..."))
    assert marked == {"example.com/t/sub", "m", "example.com/t", "n"}


def test_deep_chain_is_fully_marked():
    depth = sys.getrecursionlimit() + 500
    graph = {f"m{i}": [f"m{i + 1}"] for i in range(depth)}
    graph[f"m{depth}"] = []
    marked = mark_ancestors(graph, lambda name: name == "m0")
    assert len(marked) == depth + 1
