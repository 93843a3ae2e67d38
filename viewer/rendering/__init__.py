"""
Floodwave Viewer - Rendering Module

Grid drawing with the per-wave flip effect.
"""

from .grid_renderer import GridRenderer, flip_rect

__all__ = ['GridRenderer', 'flip_rect']
