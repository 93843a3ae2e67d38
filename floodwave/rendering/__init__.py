"""
Floodwave - Rendering

Pillow renderers for grids and snapshot sequences.
"""

from .pil_renderer import (
    render_filmstrip,
    render_grid_to_image,
    render_snapshots_to_images,
    save_snapshots_gif,
)

__all__ = [
    "render_filmstrip",
    "render_grid_to_image",
    "render_snapshots_to_images",
    "save_snapshots_gif",
]
