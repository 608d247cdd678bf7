import pytest

from showdeps.pattern import has_wildcard, is_stdlib, match_pattern


@pytest.mark.parametrize(
    "pattern, name, expected",
    [
        ("foo/...", "foo", True),
        ("foo/...", "foo/bar", True),
        ("foo/...", "foo/bar/baz", True),
        ("foo/...", "foobar", False),
        ("a...b", "axyzb", True),
        ("a...b", "ab", True),
        ("a...b", "a/x/b", True),
        ("a...b", "axyzbc", False),
        ("example.com/x", "example.com/x", True),
        ("example.com/x", "exampleXcom/x", False),
        ("example.com/x", "example.com/xy", False),
        ("...", "", True),
        ("...", "anything/at/all", True),
        ("net/.../http", "net/http", False),
        ("net/.../http", "net/x/http", True),
    ],
)
def test_match_pattern(pattern, name, expected):
    assert match_pattern(pattern)(name) is expected


def test_regex_metacharacters_are_literal():
    matches = match_pattern("gopkg.in/yaml.v2+(x)[y]")
    assert matches("gopkg.in/yaml.v2+(x)[y]")
    assert not matches("gopkg.in/yaml.v2x(x)[y]")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("fmt", True),
        ("net/http", True),
        ("C", True),
        ("github.com/foo/bar", False),
        ("gopkg.in/yaml.v2", False),
        ("example.com", False),
        ("internal/v1.2", True),
    ],
)
def test_is_stdlib(path, expected):
    assert is_stdlib(path) is expected


def test_has_wildcard():
    assert has_wildcard("foo/...")
    assert not has_wildcard("foo/bar")
