"""A copy assistant that drives the platform's native directory copy tool."""

__version__ = "0.1.0"
__all__ = ["app", "command"]