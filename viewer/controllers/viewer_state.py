"""
Floodwave Viewer - Viewer State

Manages the user-adjustable settings: fill colour, colour-pick mode, cell
size, organicness, animation speed and view toggles.
"""

from floodwave.core.palettes import DEFAULT_FILL_COLOR

from ..core.constants import (
    CELL_SIZE_MAX,
    CELL_SIZE_MIN,
    CELL_SIZE_STEP,
    DEFAULT_ANIMATION_SPEED,
    DEFAULT_CELL_SIZE,
    DEFAULT_ORGANICNESS,
    ORGANICNESS_MAX,
    ORGANICNESS_MIN,
    ORGANICNESS_STEP,
    SPEED_MAX,
    SPEED_MIN,
    SPEED_STEP,
)


def snap_to_range(value: int, minimum: int, maximum: int, step: int) -> int:
    """Clamp value to [minimum, maximum] and round it to the nearest step."""
    value = min(max(int(value), minimum), maximum)
    snapped = minimum + round((value - minimum) / step) * step
    return min(snapped, maximum)


class ViewerState:
    """Manages viewer application state."""

    def __init__(self):
        # Fill colour
        self.selected_color: str = DEFAULT_FILL_COLOR
        self.color_pick_mode: bool = False

        # Generation / playback settings
        self.cell_size: int = DEFAULT_CELL_SIZE
        self.organicness: int = DEFAULT_ORGANICNESS
        self.animation_speed: int = DEFAULT_ANIMATION_SPEED

        # View settings
        self.show_grid: bool = True
        self.sidebar_open: bool = True

    def select_color(self, color: str):
        """Use color for the next fill and leave pick mode."""
        self.selected_color = color
        self.color_pick_mode = False

    def toggle_color_pick_mode(self):
        self.color_pick_mode = not self.color_pick_mode

    def set_cell_size(self, value: int) -> bool:
        """Set cell size. Returns True if the value changed."""
        new_value = snap_to_range(value, CELL_SIZE_MIN, CELL_SIZE_MAX, CELL_SIZE_STEP)
        changed = new_value != self.cell_size
        self.cell_size = new_value
        return changed

    def set_organicness(self, value: int) -> bool:
        """Set organicness. Returns True if the value changed."""
        new_value = snap_to_range(value, ORGANICNESS_MIN, ORGANICNESS_MAX, ORGANICNESS_STEP)
        changed = new_value != self.organicness
        self.organicness = new_value
        return changed

    def set_animation_speed(self, value: int) -> bool:
        """Set milliseconds per fill wave. Returns True if the value changed."""
        new_value = snap_to_range(value, SPEED_MIN, SPEED_MAX, SPEED_STEP)
        changed = new_value != self.animation_speed
        self.animation_speed = new_value
        return changed

    def toggle_grid(self):
        """Toggle grid line visibility."""
        self.show_grid = not self.show_grid

    def toggle_sidebar(self):
        self.sidebar_open = not self.sidebar_open
