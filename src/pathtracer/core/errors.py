# core/errors.py


class PathTracerError(Exception):
    """Base class for all errors raised by the path tracer."""


class ConfigurationError(PathTracerError):
    """Raised when camera or render settings are invalid, before any ray is traced."""


class SceneError(PathTracerError):
    """Raised when a scene cannot be constructed from the given pieces."""
