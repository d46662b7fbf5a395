"""Template rendering of the generated command modules."""

from .constants import OUTPUTS
from .renderer import CommandRenderer

__all__ = ["CommandRenderer", "OUTPUTS"]
