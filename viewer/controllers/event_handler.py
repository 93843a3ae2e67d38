"""
Floodwave Viewer - Event Handler

Handles user input events including mouse, keyboard, and window events.
"""

from typing import Callable, List, Optional, Tuple

import pygame
from pygame import Rect

from floodwave.algorithms.flood_fill import flood_fill
from floodwave.core.grid import get_dimensions, is_valid_position
from floodwave.core.grid_helpers import determine_flip_direction
from floodwave.core.palettes import PRESET_COLORS

from .animation import FloodFillAnimation
from .viewer_state import ViewerState
from ..core.constants import (
    CANVAS_MARGIN,
    CELL_SIZE_STEP,
    ORGANICNESS_STEP,
    SIDEBAR_COLLAPSED_WIDTH,
    SIDEBAR_WIDTH,
    SPEED_STEP,
    STATUS_HEIGHT,
)


def get_canvas_rect(screen_width: int, screen_height: int, sidebar_open: bool) -> Rect:
    """Get the area the grid is drawn in."""
    sidebar = SIDEBAR_WIDTH if sidebar_open else SIDEBAR_COLLAPSED_WIDTH
    return Rect(
        sidebar + CANVAS_MARGIN,
        CANVAS_MARGIN,
        max(0, screen_width - sidebar - 2 * CANVAS_MARGIN),
        max(0, screen_height - STATUS_HEIGHT - 2 * CANVAS_MARGIN),
    )


class EventHandler:
    """Handles all user input events."""

    def __init__(
        self,
        state: ViewerState,
        animation: FloodFillAnimation,
        widgets: list,
        screen_width: int,
        screen_height: int,
        on_regenerate: Callable[[], None],
        on_layout_change: Callable[[], None],
        on_load: Callable[[], None],
        on_save: Callable[[], None],
        on_resize: Callable[[int, int], None],
    ):
        """
        Initialize event handler.

        Args:
            state: Viewer state
            animation: Fill playback controller (owns the displayed grid)
            widgets: Sidebar buttons and sliders
            screen_width: Screen width
            screen_height: Screen height
            on_regenerate: Callback to generate a new grid at the current size
            on_layout_change: Callback when cell size or sidebar changes the grid area
            on_load: Callback for load action
            on_save: Callback for save action
            on_resize: Callback for window resize (width, height)
        """
        self.state = state
        self.animation = animation
        self.widgets = widgets
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.on_regenerate = on_regenerate
        self.on_layout_change = on_layout_change
        self.on_load = on_load
        self.on_save = on_save
        self.on_resize = on_resize

    def update_screen_size(self, width: int, height: int):
        """Update screen dimensions."""
        self.screen_width = width
        self.screen_height = height

    def handle_events(self, events: List[pygame.event.Event]) -> bool:
        """
        Handle all pygame events.

        Args:
            events: List of pygame events to process

        Returns:
            True if application should continue running, False if quit requested
        """
        for event in events:
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                self._handle_key(event)
                continue

            # Widgets get first pick of mouse events
            consumed = False
            for widget in self.widgets:
                if widget.handle_event(event):
                    consumed = True
            if consumed:
                continue

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = self.screen_to_cell(event.pos)
                if cell is not None:
                    self.handle_cell_click(*cell)

            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)

        return True

    def _handle_key(self, event):
        """Handle keyboard input."""
        ctrl = event.mod & pygame.KMOD_CTRL

        if event.key == pygame.K_ESCAPE:
            self.animation.stop()
            self.state.color_pick_mode = False
            return

        if event.key == pygame.K_g:
            self.state.toggle_grid()
            return

        # Everything below changes the grid or the fill settings
        if self.animation.is_animating:
            return

        if event.key == pygame.K_s and ctrl:
            self.on_save()
        elif event.key == pygame.K_o and ctrl:
            self.on_load()

        elif event.key == pygame.K_r:
            self.on_regenerate()
        elif event.key == pygame.K_p:
            self.state.toggle_color_pick_mode()

        elif event.key in (pygame.K_1, pygame.K_2, pygame.K_3):
            index = event.key - pygame.K_1
            if index < len(PRESET_COLORS):
                self.state.select_color(PRESET_COLORS[index])

        elif event.key == pygame.K_LEFTBRACKET:  # [
            if self.state.set_cell_size(self.state.cell_size - CELL_SIZE_STEP):
                self.on_layout_change()
        elif event.key == pygame.K_RIGHTBRACKET:  # ]
            if self.state.set_cell_size(self.state.cell_size + CELL_SIZE_STEP):
                self.on_layout_change()

        elif event.key == pygame.K_MINUS:
            if self.state.set_organicness(self.state.organicness - ORGANICNESS_STEP):
                self.on_regenerate()
        elif event.key == pygame.K_EQUALS:
            if self.state.set_organicness(self.state.organicness + ORGANICNESS_STEP):
                self.on_regenerate()

        elif event.key == pygame.K_COMMA:
            self.state.set_animation_speed(self.state.animation_speed - SPEED_STEP)
        elif event.key == pygame.K_PERIOD:
            self.state.set_animation_speed(self.state.animation_speed + SPEED_STEP)

        elif event.key == pygame.K_TAB:
            self.state.toggle_sidebar()
            self.on_layout_change()

    def get_canvas_rect(self) -> Rect:
        """Get the canvas drawing area."""
        return get_canvas_rect(self.screen_width, self.screen_height, self.state.sidebar_open)

    def screen_to_cell(self, screen_pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        """Convert screen position to (row, col), or None outside the grid."""
        canvas_rect = self.get_canvas_rect()
        local_x = screen_pos[0] - canvas_rect.x
        local_y = screen_pos[1] - canvas_rect.y
        if local_x < 0 or local_y < 0:
            return None

        row = local_y // self.state.cell_size
        col = local_x // self.state.cell_size
        if not is_valid_position(self.animation.current_grid, row, col):
            return None
        return (row, col)

    def handle_cell_click(self, row: int, col: int):
        """Pick a colour or start a fill at (row, col)."""
        if self.animation.is_animating:
            return

        grid = self.animation.current_grid
        if not is_valid_position(grid, row, col):
            return

        if self.state.color_pick_mode:
            self.state.select_color(grid[row][col])
            return

        rows, cols = get_dimensions(grid)
        direction = determine_flip_direction(row, col, rows, cols)
        result = flood_fill(grid, row, col, self.state.selected_color)
        self.animation.start(result.snapshots, direction)
