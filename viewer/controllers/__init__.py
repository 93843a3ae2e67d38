"""
Floodwave Viewer - Controllers Module

Viewer state, fill playback, and event handling.
"""

from .animation import FloodFillAnimation
from .event_handler import EventHandler
from .viewer_state import ViewerState

__all__ = ['FloodFillAnimation', 'EventHandler', 'ViewerState']
