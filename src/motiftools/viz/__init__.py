from .draw import base_layout, draw_mapping

__all__ = [
    "base_layout",
    "draw_mapping",
]
