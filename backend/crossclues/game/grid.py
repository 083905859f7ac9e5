from __future__ import annotations

from .models import Cell, CellView


def new_grid(grid_size: int) -> list[list[Cell]]:
    return [[Cell() for _ in range(grid_size)] for _ in range(grid_size)]


def resolve_cell(grid: list[list[Cell]], row: int, column: int, player: str, correct: bool) -> None:
    cell = grid[row][column]
    if correct:
        cell.guessed_correctly = True
    else:
        cell.discarded_by = player


def project_grid(grid: list[list[Cell]], viewer: str) -> tuple[tuple[CellView, ...], ...]:
    """The grid as ``viewer`` may see it.

    Only the discarder learns that a cell was discarded. Everyone else gets
    ``discarded_by_me=False``, the same as for an open cell.
    """
    return tuple(
        tuple(
            CellView(guessed_correctly=cell.guessed_correctly, discarded_by_me=cell.discarded_by == viewer)
            for cell in row
        )
        for row in grid
    )


def is_complete(grid: list[list[Cell]]) -> bool:
    return all(cell.resolved for row in grid for cell in row)


def count_correct(grid: list[list[Cell]]) -> int:
    return sum(1 for row in grid for cell in row if cell.guessed_correctly)
