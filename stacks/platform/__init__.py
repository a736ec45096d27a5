"""References to resources owned by the base platform stack."""

from .construct import PlatformReference

__all__ = ["PlatformReference"]
