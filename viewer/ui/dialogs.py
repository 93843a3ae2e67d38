"""
Floodwave Viewer - File Dialogs

Native open/save dialogs for grid files, via plyer with a tkinter fallback
for platforms where plyer has no backend.
"""

from plyer import filechooser

GRID_FILETYPES = [("Grid files", "*.json"), ("All files", "*.*")]


def _tkinter_dialog(save: bool, title: str, default_extension: str) -> str | None:
    """Tkinter fallback for both dialog kinds."""
    try:
        import tkinter as tk
        from tkinter import filedialog
    except ImportError:
        print("Warning: tkinter not available for file dialog")
        return None

    root = tk.Tk()
    root.withdraw()
    if save:
        path = filedialog.asksaveasfilename(
            title=title, defaultextension=default_extension, filetypes=GRID_FILETYPES
        )
    else:
        path = filedialog.askopenfilename(title=title, filetypes=GRID_FILETYPES)
    root.destroy()
    return path if path else None


def ask_open_grid_path(title: str = "Load Grid") -> str | None:
    """
    Ask the user for a grid file to open.

    Returns:
        Selected file path, or None if canceled
    """
    try:
        result = filechooser.open_file(title=title, filters=GRID_FILETYPES)
        return result[0] if result else None
    except (OSError, NotImplementedError):
        return _tkinter_dialog(False, title, ".json")


def ask_save_grid_path(title: str = "Save Grid", default_extension: str = ".json") -> str | None:
    """
    Ask the user where to save a grid file.

    Returns:
        Selected file path with default_extension applied, or None if canceled
    """
    try:
        result = filechooser.save_file(title=title, filters=GRID_FILETYPES)
    except (OSError, NotImplementedError):
        return _tkinter_dialog(True, title, default_extension)

    if not result:
        return None
    path = result[0]
    if default_extension and not path.endswith(default_extension):
        path += default_extension
    return path
