"""
Floodwave Viewer - Core Module

Viewer-wide constants.
"""

from . import constants

__all__ = ['constants']
