"""
Floodwave - PIL Renderer

PIL-based rendering of grids and flood fill snapshots to images.
Used by the command-line tools to write PNG previews, filmstrips and
animated GIFs of a fill.
"""

from pathlib import Path

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.grid import Grid, get_dimensions
from ..core.palettes import RGBColor, color_to_rgb

GRID_LINE_COLOR: RGBColor = (32, 32, 32)
BACKGROUND_COLOR: RGBColor = (0, 0, 0)


def render_grid_to_image(
    grid: Grid,
    cell_size: int = 16,
    show_grid: bool = False,
) -> Image.Image:
    """
    Render a grid to a PIL Image.

    Args:
        grid: Grid of "#RRGGBB" colour tokens. Cells that are not hex
              colours are drawn black.
        cell_size: Edge length of one cell in pixels (minimum 1)
        show_grid: Draw a 1px line between cells

    Returns:
        RGB image of cols*cell_size by rows*cell_size pixels, or a 1x1
        black image for an empty grid.
    """
    cell_size = max(1, cell_size)
    rows, cols = get_dimensions(grid)
    if rows == 0 or cols == 0:
        return Image.new("RGB", (1, 1), BACKGROUND_COLOR)

    img = Image.new("RGB", (cols * cell_size, rows * cell_size), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)

    for row in range(rows):
        for col in range(cols):
            x0 = col * cell_size
            y0 = row * cell_size
            draw.rectangle(
                [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                fill=color_to_rgb(grid[row][col]),
            )

    if show_grid and cell_size > 2:
        for col in range(1, cols):
            x = col * cell_size
            draw.line([(x, 0), (x, img.height - 1)], fill=GRID_LINE_COLOR)
        for row in range(1, rows):
            y = row * cell_size
            draw.line([(0, y), (img.width - 1, y)], fill=GRID_LINE_COLOR)

    return img


def render_snapshots_to_images(
    snapshots: list[Grid],
    cell_size: int = 16,
    show_grid: bool = False,
) -> list[Image.Image]:
    """Render every snapshot of a fill as a separate image."""
    return [render_grid_to_image(snapshot, cell_size, show_grid) for snapshot in snapshots]


def render_filmstrip(
    snapshots: list[Grid],
    cell_size: int = 8,
    gap: int = 4,
) -> Image.Image:
    """
    Render all snapshots side by side in one image, left to right.

    Args:
        snapshots: Snapshot sequence from a flood fill
        cell_size: Edge length of one cell in pixels
        gap: Pixels between frames

    Returns:
        RGB image; a 1x1 black image if there are no snapshots.
    """
    frames = render_snapshots_to_images(snapshots, cell_size)
    if not frames:
        return Image.new("RGB", (1, 1), BACKGROUND_COLOR)

    width = sum(frame.width for frame in frames) + gap * (len(frames) - 1)
    height = max(frame.height for frame in frames)
    strip = Image.new("RGB", (width, height), BACKGROUND_COLOR)

    x = 0
    for frame in frames:
        strip.paste(frame, (x, 0))
        x += frame.width + gap

    return strip


def save_snapshots_gif(
    snapshots: list[Grid],
    path: str | Path,
    cell_size: int = 16,
    frame_ms: int = 100,
    hold_last_ms: int = 1000,
):
    """
    Save a fill as an animated GIF, one frame per snapshot.

    Args:
        snapshots: Snapshot sequence (must not be empty)
        path: Output file path
        cell_size: Edge length of one cell in pixels
        frame_ms: Display time of each frame
        hold_last_ms: Display time of the final frame

    Raises:
        ValueError: If snapshots is empty
    """
    if not snapshots:
        raise ValueError("snapshots cannot be empty")

    frames = render_snapshots_to_images(snapshots, cell_size)
    durations = [frame_ms] * len(frames)
    durations[-1] = max(frame_ms, hold_last_ms)

    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=durations,
        loop=0,
    )
