"""Exception types raised by tagtree."""


class TagTreeError(Exception):
    """Base class for all tagtree errors."""


class ValidationError(TagTreeError, ValueError):
    """A node was built without a required structural field."""


class FormatError(TagTreeError, ValueError):
    """An attribute input could not be parsed."""


class ConfigError(TagTreeError, ValueError):
    """A render configuration could not be loaded."""


__all__ = ["TagTreeError", "ValidationError", "FormatError", "ConfigError"]
