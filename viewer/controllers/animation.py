"""
Floodwave Viewer - Flood Fill Animation

Timed playback of a flood fill snapshot sequence. Independent of pygame:
the application feeds it elapsed milliseconds each frame.
"""

from typing import Callable, Optional

from floodwave.core.grid import Grid, Position, clone_grid
from floodwave.core.grid_helpers import changed_cells, create_display_grid


class FloodFillAnimation:
    """Steps through snapshots, one per animation_speed milliseconds."""

    def __init__(self, on_complete: Optional[Callable[[Grid], None]] = None):
        """
        Args:
            on_complete: Called with the final grid when playback finishes
        """
        self.on_complete = on_complete
        self.base_grid: Grid = []
        self.snapshots: list[Grid] = []
        self.step: int = 0
        self.direction: Optional[str] = None
        self.is_animating: bool = False
        self.flipping_cells: set[Position] = set()
        # Cells repainted by the most recent step
        self.recent_cells: set[Position] = set()
        self._elapsed_ms: float = 0.0

    @property
    def total_steps(self) -> int:
        return len(self.snapshots)

    @property
    def current_grid(self) -> Grid:
        """The grid to draw right now."""
        if self.is_animating and 0 <= self.step < len(self.snapshots):
            return create_display_grid(self.base_grid, self.snapshots[self.step])
        return self.base_grid

    def progress_in_step(self, animation_speed: int) -> float:
        """Fraction (0-1) of the current step's display time already used."""
        if not self.is_animating or animation_speed <= 0:
            return 0.0
        return min(1.0, self._elapsed_ms / animation_speed)

    def set_base_grid(self, grid: Grid):
        """Replace the grid shown when no fill is playing."""
        self.base_grid = clone_grid(grid)

    def start(self, snapshots: list[Grid], direction: Optional[str]):
        """Begin playing snapshots from the first one."""
        self.snapshots = snapshots
        self.direction = direction
        self.step = 0
        self.flipping_cells = set()
        self.recent_cells = set()
        self._elapsed_ms = 0.0
        self.is_animating = True

    def stop(self):
        """Abort playback without applying the fill."""
        self.is_animating = False
        self.step = 0
        self.snapshots = []
        self.direction = None
        self.flipping_cells = set()
        self.recent_cells = set()
        self._elapsed_ms = 0.0

    def update(self, elapsed_ms: float, animation_speed: int):
        """
        Advance playback.

        Args:
            elapsed_ms: Milliseconds since the previous update
            animation_speed: Milliseconds each snapshot stays on screen
        """
        if not self.is_animating:
            return

        if self.step >= len(self.snapshots) - 1:
            self._complete()
            return

        self._elapsed_ms += elapsed_ms
        interval = max(1, animation_speed)
        while self._elapsed_ms >= interval:
            self._elapsed_ms -= interval
            previous = self.snapshots[self.step]
            self.step += 1
            self.recent_cells = changed_cells(previous, self.snapshots[self.step])
            self.flipping_cells |= self.recent_cells
            if self.step >= len(self.snapshots) - 1:
                self._complete()
                return

    def _complete(self):
        final_grid = self.snapshots[-1] if self.snapshots else self.base_grid
        self.stop()
        self.set_base_grid(final_grid)
        if self.on_complete:
            self.on_complete(self.base_grid)
