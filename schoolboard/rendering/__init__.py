"""Board layout and preview rendering."""

from schoolboard.rendering.composer import compose_frame
from schoolboard.rendering.layout import compose_layout, layout_to_text

__all__ = ["compose_frame", "compose_layout", "layout_to_text"]
