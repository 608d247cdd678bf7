"""
Module path patterns and path classification.

A pattern is a limited glob in which ``...`` means "any string" (including
the empty string and strings containing ``/``) and there is no other
special syntax. This is the same pattern language the go command accepts.
"""

import re
from typing import Callable


def match_pattern(pattern: str) -> Callable[[str], bool]:
    """
    Compile a module pattern into a predicate over module paths.

    Args:
        pattern: Pattern such as ``github.com/foo/...`` or ``a...b``

    Returns:
        A function reporting whether a module path matches the whole pattern.
        A pattern ending in ``/...`` also matches the path without that
        suffix, so ``foo/...`` matches ``foo`` as well as ``foo/bar``.
    """
    regex = re.escape(pattern)
    regex = regex.replace(re.escape("..."), ".*")
    # Special case: foo/... matches foo too.
    if regex.endswith("/.*"):
        regex = regex[: -len("/.*")] + "(/.*)?"
    compiled = re.compile(regex, re.DOTALL)

    def matches(name: str) -> bool:
        return compiled.fullmatch(name) is not None

    return matches


def is_stdlib(path: str) -> bool:
    """Report whether an import path looks like a standard library package.

    Third-party paths start with a domain name (``github.com/...``), so a
    first path segment without a dot is treated as standard library.
    """
    return "." not in path.split("/", 1)[0]


def has_wildcard(pattern: str) -> bool:
    """Report whether a pattern contains the ``...`` wildcard."""
    return "..." in pattern
