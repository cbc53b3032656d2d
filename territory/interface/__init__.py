"""Read-only views of simulation state."""

from .renderer import MapRenderer

__all__ = ["MapRenderer"]
