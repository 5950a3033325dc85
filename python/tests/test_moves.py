"""MoveEngine — legal moves swap, illegal moves leave the grid alone."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay.moves import MoveEngine
from backend.errors import OutOfBoundsError
from backend.models.board import Direction, Grid


def test_up_swaps_blank_with_tile_above() -> None:
    grid = Grid.initialize_solved(3)

    MoveEngine.apply(grid, Direction.UP)

    assert grid.rows() == [[1, 2, 3], [4, 5, 9], [7, 8, 6]]
    assert grid.blank_position() == (1, 2)


def test_up_from_top_row_fails_and_changes_nothing() -> None:
    grid = Grid.initialize_solved(3)
    MoveEngine.apply(grid, Direction.UP)
    MoveEngine.apply(grid, Direction.UP)
    before = grid.flat()

    with pytest.raises(OutOfBoundsError):
        MoveEngine.apply(grid, Direction.UP)

    assert grid.rows() == [[1, 2, 9], [4, 5, 3], [7, 8, 6]]
    assert grid.flat() == before
    assert grid.blank_position() == (0, 2)


@pytest.mark.parametrize("size", [3, 4, 5])
def test_every_edge_rejects_outward_moves(size: int) -> None:
    edges = {
        Direction.UP: [(0, c) for c in range(size)],
        Direction.DOWN: [(size - 1, c) for c in range(size)],
        Direction.LEFT: [(r, 0) for r in range(size)],
        Direction.RIGHT: [(r, size - 1) for r in range(size)],
    }
    for direction, cells in edges.items():
        for cell in cells:
            grid = Grid.initialize_solved(size)
            grid.swap(grid.blank_position(), cell)
            snapshot = grid.copy()

            assert not MoveEngine.can_apply(grid, direction)
            with pytest.raises(OutOfBoundsError):
                MoveEngine.apply(grid, direction)
            assert grid == snapshot
            assert grid.blank_position() == cell


def test_left_and_right_move_along_columns() -> None:
    grid = Grid.initialize_solved(3)

    MoveEngine.apply(grid, Direction.LEFT)
    assert grid.rows()[2] == [7, 9, 8]

    MoveEngine.apply(grid, Direction.RIGHT)
    assert grid == Grid.initialize_solved(3)


def test_legal_moves_from_corner_and_centre() -> None:
    grid = Grid.initialize_solved(3)
    assert set(MoveEngine.legal_moves(grid)) == {Direction.UP, Direction.LEFT}

    grid.swap((2, 2), (1, 1))
    assert set(MoveEngine.legal_moves(grid)) == set(Direction)


@pytest.mark.parametrize("seed", range(10))
def test_random_legal_walk_keeps_a_permutation(seed: int) -> None:
    rng = random.Random(seed)
    grid = Grid.initialize_solved(4)

    for _ in range(200):
        MoveEngine.apply(grid, rng.choice(MoveEngine.legal_moves(grid)))
        assert grid.is_permutation_valid()
        r, c = grid.blank_position()
        assert grid.get(r, c) == grid.blank


def test_apply_all_stops_at_first_illegal_move() -> None:
    grid = Grid.initialize_solved(3)

    with pytest.raises(OutOfBoundsError):
        MoveEngine.apply_all(grid, [Direction.UP, Direction.DOWN, Direction.DOWN, Direction.LEFT])

    # UP then DOWN applied, the second DOWN refused, LEFT never tried
    assert grid == Grid.initialize_solved(3)


def test_apply_all_counts_moves() -> None:
    grid = Grid.initialize_solved(3)

    assert MoveEngine.apply_all(grid, [Direction.UP, Direction.LEFT, Direction.DOWN]) == 3
    assert grid.blank_position() == (2, 1)
