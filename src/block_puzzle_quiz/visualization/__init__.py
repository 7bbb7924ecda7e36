"""pygame presentation for the block puzzle."""

from .renderer import PygameRenderer
from .controls import translate_event

__all__ = ["PygameRenderer", "translate_event"]
