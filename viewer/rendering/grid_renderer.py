"""
Floodwave Viewer - Grid Renderer

Draws the colour grid on the canvas, including the flip effect for cells
repainted by the current fill wave.
"""

import pygame
from pygame import Rect, Surface

from floodwave.core.grid import Grid, Position, get_dimensions
from floodwave.core.palettes import color_to_rgb

from ..core.constants import COLOR_GRID


def flip_rect(cell_rect: Rect, direction: str | None, progress: float) -> Rect:
    """
    Shrink a cell rect to show a card flip part-way through.

    The cell collapses to a line at progress 0.5 and opens again by 1.0.
    Up/down flips squash vertically, left/right horizontally, and "center"
    (or no direction) does not flip.
    """
    if direction not in ("up", "down", "left", "right"):
        return cell_rect

    scale = abs(1.0 - 2.0 * min(max(progress, 0.0), 1.0))
    rect = cell_rect.copy()
    if direction in ("up", "down"):
        rect.height = max(1, int(cell_rect.height * scale))
        rect.centery = cell_rect.centery
    else:
        rect.width = max(1, int(cell_rect.width * scale))
        rect.centerx = cell_rect.centerx
    return rect


class GridRenderer:
    """Renders the colour grid."""

    @staticmethod
    def cell_rect(canvas_rect: Rect, row: int, col: int, cell_size: int) -> Rect:
        """Screen rectangle of a cell."""
        return Rect(
            canvas_rect.x + col * cell_size,
            canvas_rect.y + row * cell_size,
            cell_size,
            cell_size,
        )

    @staticmethod
    def render(
        screen: Surface,
        canvas_rect: Rect,
        grid: Grid,
        cell_size: int,
        show_grid: bool = True,
        flipping_cells: set[Position] | None = None,
        direction: str | None = None,
        progress: float = 0.0,
    ):
        """
        Render the grid.

        Args:
            screen: Pygame surface to draw on
            canvas_rect: Top-left corner of the grid on screen
            grid: Grid of colour tokens
            cell_size: Edge length of one cell in pixels
            show_grid: Whether to draw cell borders
            flipping_cells: Cells to draw mid-flip
            direction: Flip direction from determine_flip_direction
            progress: How far through the flip (0-1)
        """
        rows, cols = get_dimensions(grid)
        flipping_cells = flipping_cells or set()

        for row in range(rows):
            for col in range(cols):
                rect = GridRenderer.cell_rect(canvas_rect, row, col, cell_size)
                if (row, col) in flipping_cells:
                    pygame.draw.rect(screen, COLOR_GRID, rect)
                    rect = flip_rect(rect, direction, progress)
                pygame.draw.rect(screen, color_to_rgb(grid[row][col]), rect)

        if not show_grid:
            return

        # Vertical lines
        for col in range(cols + 1):
            x = canvas_rect.x + col * cell_size
            pygame.draw.line(screen, COLOR_GRID, (x, canvas_rect.y), (x, canvas_rect.y + rows * cell_size))

        # Horizontal lines
        for row in range(rows + 1):
            y = canvas_rect.y + row * cell_size
            pygame.draw.line(screen, COLOR_GRID, (canvas_rect.x, y), (canvas_rect.x + cols * cell_size, y))
