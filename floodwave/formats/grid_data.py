"""
Floodwave - Grid Data Files

Loads and saves grids (and fill snapshot sequences) as JSON, and checks the
shape invariants that the in-memory core relies on but never verifies: all
rows the same length and every cell a colour string.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from . import compact_json as json
from ..core.grid import Grid, clone_grid, get_dimensions


@dataclass
class InvalidCell:
    """A single problem found while validating grid data."""

    row: int
    col: int
    reason: str

    def __str__(self) -> str:
        if self.col < 0:
            return f"Row {self.row}: {self.reason}"
        return f"Row {self.row}, Col {self.col}: {self.reason}"


class GridFormatError(ValueError):
    """Raised when grid data is not a rectangular grid of colour strings."""

    def __init__(self, source: str, problems: list[InvalidCell]):
        self.source = source
        self.problems = problems
        super().__init__(str(self))

    def __str__(self) -> str:
        lines = [f"{self.source} is not a valid grid:"]
        for problem in self.problems[:10]:
            lines.append(f"    {problem}")
        if len(self.problems) > 10:
            lines.append(f"    ... and {len(self.problems) - 10} more")
        return "\n".join(lines)


def find_grid_problems(cells: Any) -> list[InvalidCell]:
    """
    Check that cells is a rectangular list of rows of strings.

    Returns:
        List of problems; empty when the grid is valid. A zero-row grid is
        valid.
    """
    if not isinstance(cells, list):
        return [InvalidCell(-1, -1, "grid must be a list of rows")]

    problems = []
    expected_width = None
    for r, row in enumerate(cells):
        if not isinstance(row, list):
            problems.append(InvalidCell(r, -1, "row must be a list"))
            continue
        if expected_width is None:
            expected_width = len(row)
        elif len(row) != expected_width:
            problems.append(
                InvalidCell(r, -1, f"has {len(row)} cells, expected {expected_width}")
            )
        for c, cell in enumerate(row):
            if not isinstance(cell, str):
                problems.append(InvalidCell(r, c, f"cell {cell!r} is not a colour string"))
    return problems


def validate_grid(cells: Any, source: str = "grid") -> Grid:
    """
    Validate grid data and return it.

    Raises:
        GridFormatError: If the data is not a rectangular grid of strings
    """
    problems = find_grid_problems(cells)
    if problems:
        raise GridFormatError(source, problems)
    return cells


def _read_json(path: str) -> Any:
    """Parse a JSON file, reporting undecodable content as a GridFormatError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise GridFormatError(path, [InvalidCell(-1, -1, f"invalid JSON: {e}")]) from e


def _valid_organicness(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # NaN fails both comparisons
    return 0 <= value <= 100


class GridData:
    """A grid plus the settings it was generated with, backed by a JSON file."""

    def __init__(self, cells: Optional[Grid] = None, organicness: Optional[int] = None):
        self.cells: Grid = clone_grid(cells) if cells else []
        self.organicness: Optional[int] = organicness
        self.filepath: Optional[str] = None
        self.modified: bool = False

    @property
    def rows(self) -> int:
        return get_dimensions(self.cells)[0]

    @property
    def cols(self) -> int:
        return get_dimensions(self.cells)[1]

    def load(self, path: str):
        """
        Load grid data from a JSON file.

        Raises:
            GridFormatError: If the file does not hold a valid grid
            FileNotFoundError: If the file does not exist
        """
        data = _read_json(path)

        if not isinstance(data, dict) or "cells" not in data:
            raise GridFormatError(path, [InvalidCell(-1, -1, "missing 'cells'")])

        cells = validate_grid(data["cells"], path)
        rows, cols = get_dimensions(cells)
        problems = []
        if "rows" in data and data["rows"] != rows:
            problems.append(InvalidCell(-1, -1, f"'rows' is {data['rows']} but cells have {rows}"))
        if "cols" in data and data["cols"] != cols:
            problems.append(InvalidCell(-1, -1, f"'cols' is {data['cols']} but cells have {cols}"))
        organicness = data.get("organicness")
        if organicness is not None and not _valid_organicness(organicness):
            problems.append(InvalidCell(-1, -1, f"'organicness' {organicness!r} is not a number from 0 to 100"))
        if problems:
            raise GridFormatError(path, problems)

        self.cells = clone_grid(cells)
        self.organicness = organicness
        self.filepath = path
        self.modified = False

    def save(self, path: Optional[str] = None):
        """Save grid data to a JSON file."""
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        data: Dict[str, Any] = {
            "rows": self.rows,
            "cols": self.cols,
        }
        if self.organicness is not None:
            data["organicness"] = self.organicness
        data["cells"] = self.cells

        with open(path, "w") as f:
            json.dump(data, f, indent=2)

        self.filepath = path
        self.modified = False

    def set_cells(self, cells: Grid):
        """Replace the grid (e.g. with the final state of a fill)."""
        self.cells = clone_grid(cells)
        self.modified = True


def save_snapshots(snapshots: List[Grid], path: str):
    """Write a fill's snapshot sequence to a JSON file."""
    with open(path, "w") as f:
        json.dump({"snapshots": snapshots}, f, indent=2)


def load_snapshots(path: str) -> List[Grid]:
    """
    Read a snapshot sequence written by save_snapshots.

    Raises:
        GridFormatError: If any snapshot is not a valid grid
    """
    data = _read_json(path)

    if not isinstance(data, dict) or not isinstance(data.get("snapshots"), list):
        raise GridFormatError(path, [InvalidCell(-1, -1, "missing 'snapshots' list")])

    return [
        validate_grid(snapshot, f"{path} snapshot {i}")
        for i, snapshot in enumerate(data["snapshots"])
    ]
