"""
Floodwave Viewer - Viewer Package

A Pygame-based viewer that animates wave flood fills over generated grids.
"""

from .application import ViewerApplication
from .main import main

__all__ = ['ViewerApplication', 'main']
