"""Exception types raised by the dependency analyzer."""


class ShowdepsError(Exception):
    """Base class for all errors surfaced to the command line."""


class ResolutionError(ShowdepsError):
    """A module path could not be located by the resolver."""

    def __init__(self, path: str, reason: str = "not found"):
        self.path = path
        self.reason = reason
        super().__init__(f'cannot find "{path}": {reason}')


class PatternError(ShowdepsError):
    """Invalid module pattern.

    The pattern grammar only knows the ``...`` wildcard, so compiling a
    pattern never fails in practice.
    """


class ConfigError(ShowdepsError):
    """Configuration or module index file could not be loaded."""
