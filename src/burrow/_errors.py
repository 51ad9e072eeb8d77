"""Burrow error hierarchy.

All burrow-specific errors inherit from BurrowError for easy catching.
"""


class BurrowError(Exception):
    """Base error for all burrow operations."""


class ConfigError(BurrowError):
    """Invalid or missing configuration."""


class RouteError(BurrowError):
    """A route file could not be turned into a registered route."""


class RouteLoadError(RouteError):
    """A route module raised while being imported."""


class MissingHandlerError(RouteError):
    """A method file exports neither its method function nor ``handler``."""


class DuplicateRouteError(RouteError):
    """The same method is implemented by two files in one directory."""


class RouteConflictError(RouteError):
    """Two routes share a fingerprint and strict mode is on."""
