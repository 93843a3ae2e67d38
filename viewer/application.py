"""
Floodwave Viewer - Application

Main application class that wires the territory generator and the wave
flood fill to a pygame window.
"""
import random
from pathlib import Path
from typing import List, Optional

import pygame
from pygame import Rect

from floodwave.algorithms.territory_generator import TerritoryGenerator
from floodwave.core.grid import Grid, get_dimensions
from floodwave.core.grid_helpers import calculate_grid_dimensions
from floodwave.core.palettes import PRESET_COLORS, color_to_rgb, hex_to_rgb
from floodwave.formats.grid_data import GridData, GridFormatError

from .core.constants import *
from .controllers.animation import FloodFillAnimation
from .controllers.event_handler import EventHandler, get_canvas_rect
from .controllers.viewer_state import ViewerState
from .rendering.grid_renderer import GridRenderer
from .ui.dialogs import ask_open_grid_path, ask_save_grid_path
from .ui.widgets import Button, Slider


class ViewerApplication:
    """Main viewer application."""

    def __init__(
        self,
        screen_width: int = DEFAULT_SCREEN_WIDTH,
        screen_height: int = DEFAULT_SCREEN_HEIGHT,
        seed: Optional[int] = None,
    ):
        pygame.init()

        self.screen_width = screen_width
        self.screen_height = screen_height
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.RESIZABLE
        )
        pygame.display.set_caption("Floodwave")

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_small = pygame.font.SysFont("monospace", 12)

        self.state = ViewerState()
        self.generator = TerritoryGenerator(rng=random.Random(seed))
        self.animation = FloodFillAnimation(on_complete=self._on_fill_complete)
        self.grid_data = GridData()

        self.buttons: List[Button] = []
        self.sliders: List[Slider] = []
        self.btn_pick: Optional[Button] = None
        self._swatch_y = 0
        self._create_ui()

        self.event_handler = EventHandler(
            self.state,
            self.animation,
            self.buttons + self.sliders,
            self.screen_width,
            self.screen_height,
            on_regenerate=self.regenerate,
            on_layout_change=self._on_layout_change,
            on_load=self._on_load,
            on_save=self._on_save,
            on_resize=self._on_resize,
        )

        self.regenerate()

        self.running = True
        self.clock = pygame.time.Clock()

    def _create_ui(self):
        """Create sidebar widgets."""
        self.buttons = []
        self.sliders = []
        if not self.state.sidebar_open:
            self.buttons.append(Button(Rect(5, 5, 30, 30), "=", self._toggle_sidebar))
            return

        x = 10
        y = 10
        width = SIDEBAR_WIDTH - 20

        self.buttons.append(Button(Rect(x, y, 30, 30), "=", self._toggle_sidebar))
        y += 50

        # Preset colours
        for i, color in enumerate(PRESET_COLORS):
            self.buttons.append(
                Button(
                    Rect(x + i * 40, y, 32, 32),
                    "",
                    lambda c=color: self.state.select_color(c),
                    background_color=hex_to_rgb(color),
                )
            )
        y += 45

        self.btn_pick = Button(Rect(x, y, width, 30), "Pick from grid", self.state.toggle_color_pick_mode)
        self.buttons.append(self.btn_pick)
        y += 40
        self._swatch_y = y
        y += 40

        self.sliders.append(Slider(
            Rect(x, y, width, 16), "Cell Size", CELL_SIZE_MIN, CELL_SIZE_MAX, CELL_SIZE_STEP,
            self.state.cell_size, self._on_cell_size_change, unit="px",
        ))
        y += 50
        self.sliders.append(Slider(
            Rect(x, y, width, 16), "Organic", ORGANICNESS_MIN, ORGANICNESS_MAX, ORGANICNESS_STEP,
            self.state.organicness, self._on_organicness_change, unit="%",
        ))
        y += 50
        self.sliders.append(Slider(
            Rect(x, y, width, 16), "Speed", SPEED_MIN, SPEED_MAX, SPEED_STEP,
            self.state.animation_speed, self.state.set_animation_speed, unit="ms",
        ))
        y += 30

        self.buttons.append(Button(Rect(x, y, width, 30), "Reset", self.regenerate))
        y += 40
        self.buttons.append(Button(Rect(x, y, (width - 10) // 2, 30), "Load", self._on_load))
        self.buttons.append(Button(Rect(x + (width + 10) // 2, y, (width - 10) // 2, 30), "Save", self._on_save))

    def _rebuild_ui(self):
        self._create_ui()
        self.event_handler.widgets = self.buttons + self.sliders

    def _grid_size(self) -> tuple[int, int]:
        """Rows and columns that fit the canvas at the current cell size."""
        canvas = get_canvas_rect(self.screen_width, self.screen_height, self.state.sidebar_open)
        return calculate_grid_dimensions(canvas.width, canvas.height, self.state.cell_size)

    def regenerate(self):
        """Generate a fresh grid that fills the canvas."""
        self.animation.stop()
        rows, cols = self._grid_size()
        grid = self.generator.generate(rows, cols, self.state.organicness)
        self.animation.set_base_grid(grid)
        self.grid_data = GridData(grid, self.state.organicness)

    def _toggle_sidebar(self):
        self.state.toggle_sidebar()
        self._on_layout_change()

    def _on_layout_change(self):
        self._rebuild_ui()
        self.regenerate()

    def _on_cell_size_change(self, value: int):
        if self.state.set_cell_size(value):
            self.regenerate()

    def _on_organicness_change(self, value: int):
        if self.state.set_organicness(value):
            self.regenerate()

    def _on_fill_complete(self, final_grid: Grid):
        self.grid_data.set_cells(final_grid)

    def _on_load(self):
        """Load a grid file."""
        path = ask_open_grid_path()
        if path:
            self.load_grid(path)

    def _on_save(self):
        """Save the current grid."""
        path = self.grid_data.filepath or ask_save_grid_path()
        if not path:
            return
        try:
            self.grid_data.save(path)
        except OSError as e:
            print(f"Warning: Failed to save grid {path}: {e}")
            return
        print(f"Saved: {path}")

    def _on_resize(self, width: int, height: int):
        """Handle window resize."""
        self.screen_width = width
        self.screen_height = height
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.event_handler.update_screen_size(width, height)
        self._on_layout_change()

    def load_grid(self, path: str):
        """Load a grid from file path and show it."""
        grid_data = GridData()
        try:
            grid_data.load(path)
        except (OSError, GridFormatError) as e:
            print(f"Warning: Failed to load grid {path}: {e}")
            return

        self.animation.stop()
        self.grid_data = grid_data
        self.animation.set_base_grid(grid_data.cells)
        if grid_data.organicness is not None:
            self.state.set_organicness(grid_data.organicness)
            self._rebuild_ui()

    def run(self):
        """Main loop."""
        while self.running:
            elapsed = self.clock.tick(FPS)
            events = pygame.event.get()
            self.running = self.event_handler.handle_events(events)
            self.animation.update(elapsed, self.state.animation_speed)
            self._render()

        pygame.quit()

    def _render(self):
        """Render the viewer."""
        self.screen.fill(COLOR_BG)
        self._render_canvas()
        self._render_sidebar()
        self._render_status()
        pygame.display.flip()

    def _render_sidebar(self):
        width = SIDEBAR_WIDTH if self.state.sidebar_open else SIDEBAR_COLLAPSED_WIDTH
        pygame.draw.rect(self.screen, COLOR_SIDEBAR, (0, 0, width, self.screen_height - STATUS_HEIGHT))

        # Settings are locked while a fill is playing
        locked = self.animation.is_animating
        for button in self.buttons:
            button.enabled = not locked or button.text == "="
        for slider in self.sliders:
            slider.enabled = not locked

        # Keyboard shortcuts change state behind the sliders' backs
        values = (self.state.cell_size, self.state.organicness, self.state.animation_speed)
        for slider, value in zip(self.sliders, values):
            if not slider.dragging:
                slider.value = value

        if self.btn_pick is not None:
            self.btn_pick.active = self.state.color_pick_mode

        for button in self.buttons:
            button.render(self.screen, self.font_small)
        for slider in self.sliders:
            slider.render(self.screen, self.font_small)

        if self.state.sidebar_open:
            swatch = Rect(10, self._swatch_y, 24, 24)
            pygame.draw.rect(self.screen, color_to_rgb(self.state.selected_color), swatch)
            label = self.font_small.render(f"Current {self.state.selected_color}", True, COLOR_TEXT)
            self.screen.blit(label, (swatch.right + 8, swatch.y + 5))

    def _render_canvas(self):
        """Render the grid."""
        canvas_rect = get_canvas_rect(self.screen_width, self.screen_height, self.state.sidebar_open)
        GridRenderer.render(
            self.screen,
            canvas_rect,
            self.animation.current_grid,
            self.state.cell_size,
            self.state.show_grid,
            flipping_cells=self.animation.recent_cells,
            direction=self.animation.direction,
            progress=self.animation.progress_in_step(self.state.animation_speed),
        )

    def _render_status(self):
        """Render status bar."""
        status_rect = Rect(0, self.screen_height - STATUS_HEIGHT, self.screen_width, STATUS_HEIGHT)
        pygame.draw.rect(self.screen, COLOR_STATUS, status_rect)

        rows, cols = get_dimensions(self.animation.current_grid)
        status_parts = [f"Grid: {cols}x{rows}", f"Color: {self.state.selected_color}"]

        if self.state.color_pick_mode:
            status_parts.append("PICK MODE")

        if self.animation.is_animating:
            status_parts.append(
                f"Wave {self.animation.step}/{self.animation.total_steps - 1} ({self.animation.direction})"
            )
        else:
            cell = self.event_handler.screen_to_cell(pygame.mouse.get_pos())
            if cell:
                row, col = cell
                status_parts.append(f"Cell: ({row}, {col}) {self.animation.current_grid[row][col]}")

        if self.grid_data.filepath:
            name = Path(self.grid_data.filepath).name
            modified = "*" if self.grid_data.modified else ""
            status_parts.append(f"File: {name}{modified}")

        status_text = "  |  ".join(status_parts)
        text_surf = self.font.render(status_text, True, COLOR_TEXT)
        self.screen.blit(text_surf, (10, self.screen_height - STATUS_HEIGHT + 8))
