"""Shared pytest fixtures for grid, fill and generator tests."""

import random

import pytest

RED = "#FF0000"
GREEN = "#00FF00"
BLUE = "#0000FF"


@pytest.fixture
def rng():
    """Seeded random source for reproducible generation."""
    return random.Random(1234)


@pytest.fixture
def single_cell_grid():
    """1x1 red grid."""
    return [[RED]]


@pytest.fixture
def row_grid():
    """One row: two reds then a green."""
    return [[RED, RED, GREEN]]


@pytest.fixture
def cross_grid():
    """3x3 grid with a red plus shape and green corners."""
    return [
        [GREEN, RED, GREEN],
        [RED, RED, RED],
        [GREEN, RED, GREEN],
    ]


@pytest.fixture
def split_grid():
    """Two red regions separated by a green column."""
    return [
        [RED, GREEN, RED],
        [RED, GREEN, RED],
        [RED, GREEN, RED],
    ]


@pytest.fixture
def uniform_grid():
    """5x5 grid of a single colour."""
    return [[RED] * 5 for _ in range(5)]
