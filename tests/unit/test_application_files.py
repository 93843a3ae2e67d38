"""Unit tests for ViewerApplication file handling (no window needed)."""

import pytest

from floodwave.formats.grid_data import GridData
from viewer import application
from viewer.application import ViewerApplication


@pytest.fixture
def app(cross_grid):
    """ViewerApplication with only the file-handling attributes set up."""
    viewer_app = ViewerApplication.__new__(ViewerApplication)
    viewer_app.grid_data = GridData(cross_grid, organicness=100)
    return viewer_app


def test_load_grid_reports_malformed_json(app, tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    app.load_grid(str(path))
    assert "Warning: Failed to load grid" in capsys.readouterr().out
    assert app.grid_data.filepath is None


def test_load_grid_reports_bad_organicness(app, tmp_path, capsys):
    path = tmp_path / "grid.json"
    path.write_text('{"organicness": "high", "cells": [["#FF006E"]]}')
    app.load_grid(str(path))
    assert "Warning: Failed to load grid" in capsys.readouterr().out


def test_save_to_unwritable_path_warns(app, tmp_path, monkeypatch, capsys):
    target = str(tmp_path / "missing_dir" / "grid.json")
    monkeypatch.setattr(application, "ask_save_grid_path", lambda: target)
    app._on_save()
    assert "Warning: Failed to save grid" in capsys.readouterr().out
    assert app.grid_data.filepath is None


def test_save_writes_file(app, tmp_path, monkeypatch, capsys):
    target = str(tmp_path / "grid.json")
    monkeypatch.setattr(application, "ask_save_grid_path", lambda: target)
    app._on_save()
    assert "Saved:" in capsys.readouterr().out
    assert app.grid_data.filepath == target


def test_save_cancelled(app, monkeypatch):
    monkeypatch.setattr(application, "ask_save_grid_path", lambda: None)
    app._on_save()
    assert app.grid_data.filepath is None
