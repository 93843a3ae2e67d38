"""
Floodwave Viewer - UI Module

Sidebar widgets and file dialogs.
"""

from .dialogs import ask_open_grid_path, ask_save_grid_path
from .widgets import Button, Slider

__all__ = [
    "Button",
    "Slider",
    "ask_open_grid_path",
    "ask_save_grid_path",
]
