"""High-level clients."""

from .api import DrukarniaClient

__all__ = ["DrukarniaClient"]
