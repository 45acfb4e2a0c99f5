"""Toroidal universe for Conway's Game of Life."""

from typing import Iterable, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64

DEAD_GLYPH = "⬜"
ALIVE_GLYPH = "🟪"

# Moore neighborhood, self excluded
_NEIGHBOR_OFFSETS = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


class Universe:
    """A fixed-size grid of cells whose edges wrap around (a torus).

    Cells live in a flat row-major ``uint8`` buffer of length
    ``width * height``; cell ``(row, column)`` sits at
    ``row * width + column``. A second buffer of the same size receives
    each new generation and the two are swapped at the end of a tick.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        """Create a universe seeded with the default pattern.

        Cell ``i`` starts alive when ``i % 2 == 0`` or ``i % 7 == 0``.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise ValueError(f"Universe {name} must be a positive integer, got {value!r}")

        self._width = int(width)
        self._height = int(height)
        self._generation = 0

        indices = np.arange(self._width * self._height)
        self._cells = ((indices % 2 == 0) | (indices % 7 == 0)).astype(np.uint8)
        self._next_cells = np.empty_like(self._cells)

        # Reused for every neighbor count
        self._torch_input = torch.zeros(1, 1, self._height, self._width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def new(cls) -> "Universe":
        """Create the default 64x64 seeded universe."""
        return cls()

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable[int]) -> "Universe":
        """Create a universe from a flat row-major sequence of cell states.

        Args:
            width: Number of columns
            height: Number of rows
            cells: ``width * height`` values, each a Cell or 0/1

        Returns:
            New Universe holding the given cells

        Raises:
            ValueError: If the number of cells doesn't match the dimensions
        """
        universe = cls(width, height)
        data = np.array([int(Cell(cell)) for cell in cells], dtype=np.uint8)
        if data.shape != universe._cells.shape:
            raise ValueError(f"Expected {width * height} cells for a {width}x{height} universe, got {data.size}")

        universe._cells[:] = data
        return universe

    @classmethod
    def from_rows(cls, rows: Sequence[str], alive_glyph: str = "*") -> "Universe":
        """Create a universe from text rows.

        Every character equal to ``alive_glyph`` is an alive cell, any
        other character is dead.

        Args:
            rows: One string per row, all of the same length
            alive_glyph: Character marking alive cells

        Returns:
            New Universe with ``len(rows)`` rows

        Raises:
            ValueError: If there are no rows or the rows are ragged
        """
        rows = list(rows)
        if not rows or not rows[0]:
            raise ValueError("At least one non-empty row is required")

        width = len(rows[0])
        for number, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {number} has {len(row)} cells, expected {width}")

        cells = [Cell.ALIVE if char == alive_glyph else Cell.DEAD for row in rows for char in row]
        return cls.from_cells(width, len(rows), cells)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Copy of the current flat row-major cell buffer."""
        return self._cells.copy()

    @property
    def generation(self) -> int:
        """Number of ticks applied since construction."""
        return self._generation

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def get_index(self, row: int, column: int) -> int:
        """Map a (row, column) position to its index in the cell buffer."""
        assert 0 <= row < self._height and 0 <= column < self._width, (
            f"Position ({row}, {column}) outside {self._height}x{self._width} universe"
        )
        return row * self._width + column

    def get_cell(self, row: int, column: int) -> Cell:
        """Get the state of the cell at (row, column)."""
        return Cell(int(self._cells[self.get_index(row, column)]))

    def set_cell(self, row: int, column: int, cell: Cell) -> None:
        """Set the state of the cell at (row, column).

        Args:
            row: Row coordinate
            column: Column coordinate
            cell: New state (a Cell, or anything Cell accepts such as 0/1)
        """
        self._cells[self.get_index(row, column)] = Cell(cell)

    def clear(self) -> None:
        """Kill every cell."""
        self._cells.fill(Cell.DEAD)

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count alive cells among the 8 neighbors of (row, column).

        Neighbor coordinates wrap around the edges, so a cell on row 0
        sees row ``height - 1`` above it.

        Args:
            row: Row coordinate, within bounds
            column: Column coordinate, within bounds

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for delta_row, delta_col in _NEIGHBOR_OFFSETS:
            # Adding the dimension keeps the sum non-negative before wrapping
            neighbor_row = (row + delta_row + self._height) % self._height
            neighbor_col = (column + delta_col + self._width) % self._width
            count += int(self._cells[self.get_index(neighbor_row, neighbor_col)])
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a circular-padded convolution.

        Returns:
            Flat row-major array with the live neighbor count of every cell
        """
        self._torch_input[0, 0] = torch.from_numpy(
            self._cells.reshape(self._height, self._width).astype(np.float32)
        )
        padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)
        return neighbors[0, 0].numpy().astype(np.uint8).reshape(-1)

    def tick(self) -> None:
        """Advance the universe by one generation.

        Every next state is computed from the current buffer only; the
        result is written into the spare buffer, which then becomes the
        current one.
        """
        current = self._cells
        neighbors = self.count_all_neighbors()
        alive = current == Cell.ALIVE

        next_cells = self._next_cells
        next_cells[:] = current
        next_cells[alive & (neighbors < 2)] = Cell.DEAD
        next_cells[alive & ((neighbors == 2) | (neighbors == 3))] = Cell.ALIVE
        next_cells[alive & (neighbors > 3)] = Cell.DEAD
        next_cells[~alive & (neighbors == 3)] = Cell.ALIVE

        self._cells, self._next_cells = next_cells, current
        self._generation += 1

    def render(self, dead_glyph: str = DEAD_GLYPH, alive_glyph: str = ALIVE_GLYPH) -> str:
        """Render the universe as text.

        Args:
            dead_glyph: Character drawn for dead cells
            alive_glyph: Character drawn for alive cells

        Returns:
            ``height`` lines of ``width`` glyphs, each ending with a newline
        """
        glyphs = (dead_glyph, alive_glyph)
        lines = []
        for start in range(0, self._cells.size, self._width):
            line = self._cells[start:start + self._width]
            lines.append("".join(glyphs[cell] for cell in line) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Universe(width={self._width}, height={self._height}, "
            f"generation={self._generation}, population={self.population})"
        )

    def __eq__(self, other: object) -> bool:
        """Check if two universes hold the same cells."""
        if not isinstance(other, Universe):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)
