"""Cell states and the Game of Life update rule."""

from enum import IntEnum


class Cell(IntEnum):
    """State of a single cell.

    Values fit in one byte so a whole generation can be stored as a
    dense ``uint8`` buffer.
    """

    DEAD = 0
    ALIVE = 1


def next_cell_state(cell: Cell, live_neighbors: int) -> Cell:
    """Compute the next state of a cell from its current state.

    Rules are checked in order and the first match wins:

    1. Alive with fewer than 2 live neighbors dies (underpopulation)
    2. Alive with 2 or 3 live neighbors lives on (stasis)
    3. Alive with more than 3 live neighbors dies (overpopulation)
    4. Dead with exactly 3 live neighbors becomes alive (reproduction)
    5. Anything else keeps its state

    Args:
        cell: Current state of the cell
        live_neighbors: Number of alive cells in its Moore neighborhood (0-8)

    Returns:
        State of the cell in the next generation
    """
    if cell == Cell.ALIVE and live_neighbors < 2:
        return Cell.DEAD
    if cell == Cell.ALIVE and live_neighbors in (2, 3):
        return Cell.ALIVE
    if cell == Cell.ALIVE and live_neighbors > 3:
        return Cell.DEAD
    if cell == Cell.DEAD and live_neighbors == 3:
        return Cell.ALIVE
    return Cell(cell)
