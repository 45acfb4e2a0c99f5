"""Tests for the Universe class."""

import numpy as np
import pytest
from lifeverse.core.cell import Cell, next_cell_state
from lifeverse.core.universe import Universe, DEAD_GLYPH, ALIVE_GLYPH


def reference_tick(universe):
    """Compute the next generation cell by cell from a frozen copy."""
    snapshot = Universe.from_cells(universe.width, universe.height, universe.cells)
    expected = []
    for row in range(snapshot.height):
        for column in range(snapshot.width):
            expected.append(next_cell_state(snapshot.get_cell(row, column), snapshot.live_neighbor_count(row, column)))
    return Universe.from_cells(universe.width, universe.height, expected)


def in_place_tick(universe):
    """Update cells while scanning, reading already-updated neighbors."""
    for row in range(universe.height):
        for column in range(universe.width):
            state = next_cell_state(universe.get_cell(row, column), universe.live_neighbor_count(row, column))
            universe.set_cell(row, column, state)


class TestConstruction:
    """Test cases for creating universes."""

    def test_default_dimensions(self):
        """Test the default universe is 64x64."""
        universe = Universe.new()
        assert universe.width == 64
        assert universe.height == 64
        assert universe.shape == (64, 64)
        assert universe.generation == 0

    def test_seed_reproducibility(self):
        """Test cell i starts alive iff i % 2 == 0 or i % 7 == 0."""
        cells = Universe.new().cells
        assert len(cells) == 4096
        for i in range(4096):
            expected = Cell.ALIVE if (i % 2 == 0 or i % 7 == 0) else Cell.DEAD
            assert cells[i] == expected, f"cell {i}"

    def test_custom_dimensions_use_same_seed(self):
        """Test parameterized universes are seeded the same way."""
        universe = Universe(10, 3)
        assert universe.shape == (10, 3)
        assert len(universe.cells) == 30
        assert universe.get_cell(0, 7) == Cell.ALIVE
        assert universe.get_cell(0, 9) == Cell.DEAD
        assert universe.get_cell(1, 4) == Cell.ALIVE  # index 14

    @pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 5), (2.5, 5), (True, 5)])
    def test_invalid_dimensions(self, width, height):
        """Test non-positive or non-integer dimensions are rejected."""
        with pytest.raises(ValueError):
            Universe(width, height)

    def test_from_cells(self):
        """Test building a universe from a flat cell sequence."""
        universe = Universe.from_cells(3, 2, [1, 0, 0, 0, 0, Cell.ALIVE])
        assert universe.get_cell(0, 0) == Cell.ALIVE
        assert universe.get_cell(1, 2) == Cell.ALIVE
        assert universe.population == 2

    def test_from_cells_size_mismatch(self):
        """Test a cell sequence of the wrong length is rejected."""
        with pytest.raises(ValueError):
            Universe.from_cells(3, 3, [0] * 8)

    def test_from_rows(self):
        """Test building a universe from text rows."""
        universe = Universe.from_rows(["*..", "..*"])
        assert universe.shape == (3, 2)
        assert universe.get_cell(0, 0) == Cell.ALIVE
        assert universe.get_cell(1, 2) == Cell.ALIVE
        assert universe.population == 2

    def test_from_rows_custom_glyph(self):
        """Test the alive glyph is configurable."""
        universe = Universe.from_rows(["#.", ".#"], alive_glyph="#")
        assert universe.population == 2

    def test_from_rows_invalid(self):
        """Test empty and ragged rows are rejected."""
        with pytest.raises(ValueError):
            Universe.from_rows([])

        with pytest.raises(ValueError):
            Universe.from_rows(["..", "..."])


class TestIndexing:
    """Test cases for index mapping and cell access."""

    def test_get_index_row_major(self):
        """Test index mapping follows row-major order."""
        universe = Universe(5, 4)
        assert universe.get_index(0, 0) == 0
        assert universe.get_index(0, 4) == 4
        assert universe.get_index(1, 0) == 5
        assert universe.get_index(3, 4) == 19

    def test_get_index_bijection(self):
        """Test every position maps to a unique index, visited in order."""
        universe = Universe(7, 3)
        indices = [universe.get_index(row, column) for row in range(3) for column in range(7)]
        assert indices == list(range(21))

    def test_get_index_out_of_range(self):
        """Test out-of-range positions violate the indexing contract."""
        universe = Universe(4, 4)
        with pytest.raises(AssertionError):
            universe.get_index(4, 0)

        with pytest.raises(AssertionError):
            universe.get_index(0, -1)

    def test_set_and_clear(self):
        """Test setting cells and clearing the universe."""
        universe = Universe(4, 4)
        universe.clear()
        assert universe.population == 0

        universe.set_cell(2, 3, Cell.ALIVE)
        assert universe.get_cell(2, 3) == Cell.ALIVE
        assert universe.population == 1

        universe.set_cell(2, 3, Cell.DEAD)
        assert universe.population == 0

    def test_cells_returns_copy(self):
        """Test the cell accessor doesn't expose the internal buffer."""
        universe = Universe(4, 4)
        cells = universe.cells
        cells[:] = 0
        assert universe.population > 0


class TestNeighbors:
    """Test cases for neighbor counting."""

    def test_neighbor_count_range(self):
        """Test counts stay within 0-8 for every cell."""
        universe = Universe.new()
        for row in range(universe.height):
            for column in range(universe.width):
                assert 0 <= universe.live_neighbor_count(row, column) <= 8

    def test_full_and_empty(self):
        """Test extreme populations."""
        universe = Universe.from_cells(5, 5, [1] * 25)
        assert universe.live_neighbor_count(2, 2) == 8
        assert universe.live_neighbor_count(0, 0) == 8

        universe.clear()
        assert universe.live_neighbor_count(0, 0) == 0

    def test_self_not_counted(self):
        """Test a lone cell has no live neighbors."""
        universe = Universe.from_rows([".....", ".....", "..*..", ".....", "....."])
        assert universe.live_neighbor_count(2, 2) == 0
        assert universe.live_neighbor_count(1, 1) == 1

    def test_toroidal_wrap_rows(self):
        """Test row 0 sees row height-1 above it and vice versa."""
        universe = Universe(4, 5)
        universe.clear()
        universe.set_cell(4, 2, Cell.ALIVE)

        assert universe.live_neighbor_count(0, 2) == 1
        assert universe.live_neighbor_count(0, 1) == 1
        assert universe.live_neighbor_count(0, 3) == 1
        assert universe.live_neighbor_count(1, 2) == 0

        universe.clear()
        universe.set_cell(0, 2, Cell.ALIVE)
        assert universe.live_neighbor_count(4, 2) == 1

    def test_toroidal_wrap_columns(self):
        """Test column 0 sees the last column to its left and vice versa."""
        universe = Universe(4, 5)
        universe.clear()
        universe.set_cell(2, 3, Cell.ALIVE)

        assert universe.live_neighbor_count(2, 0) == 1
        assert universe.live_neighbor_count(1, 0) == 1
        assert universe.live_neighbor_count(3, 0) == 1

        universe.clear()
        universe.set_cell(2, 0, Cell.ALIVE)
        assert universe.live_neighbor_count(2, 3) == 1

    def test_toroidal_wrap_corners(self):
        """Test opposite corners are diagonal neighbors."""
        universe = Universe(5, 5)
        universe.clear()
        universe.set_cell(0, 0, Cell.ALIVE)
        assert universe.live_neighbor_count(4, 4) == 1

    @pytest.mark.parametrize("width, height", [(2, 3), (3, 3), (5, 4), (7, 11), (64, 64)])
    def test_count_all_neighbors_matches_scalar(self, width, height):
        """Test vectorized counts agree with per-cell counts."""
        rng = np.random.default_rng(width * 100 + height)
        universe = Universe.from_cells(width, height, rng.integers(0, 2, size=width * height))

        counts = universe.count_all_neighbors()
        assert counts.shape == (width * height,)
        for row in range(height):
            for column in range(width):
                assert counts[universe.get_index(row, column)] == universe.live_neighbor_count(row, column)


class TestTick:
    """Test cases for generation advance."""

    def test_underpopulation(self):
        """Test alive cells with 0 or 1 neighbors die."""
        universe = Universe.from_rows([".....", ".....", "..*..", ".....", "....."])
        universe.tick()
        assert universe.population == 0

        universe = Universe.from_rows([".....", ".....", ".**..", ".....", "....."])
        universe.tick()
        assert universe.get_cell(2, 1) == Cell.DEAD
        assert universe.get_cell(2, 2) == Cell.DEAD

    def test_stasis(self):
        """Test alive cells with 2 or 3 neighbors survive."""
        # Block: every cell has 3 neighbors
        universe = Universe.from_rows(["......", "......", "..**..", "..**..", "......", "......"])
        before = universe.cells
        universe.tick()
        assert np.array_equal(universe.cells, before)

        # Middle of a blinker has 2 neighbors
        universe = Universe.from_rows([".....", ".....", ".***.", ".....", "....."])
        assert universe.live_neighbor_count(2, 2) == 2
        universe.tick()
        assert universe.get_cell(2, 2) == Cell.ALIVE

    def test_overpopulation(self):
        """Test alive cells with more than 3 neighbors die."""
        universe = Universe.from_rows([".....", "..*..", ".***.", "..*..", "....."])
        assert universe.live_neighbor_count(2, 2) == 4
        universe.tick()
        assert universe.get_cell(2, 2) == Cell.DEAD

    def test_reproduction(self):
        """Test dead cells with exactly 3 neighbors come alive."""
        universe = Universe.from_rows([".....", ".**..", ".*...", ".....", "....."])
        assert universe.get_cell(2, 2) == Cell.DEAD
        assert universe.live_neighbor_count(2, 2) == 3
        universe.tick()
        assert universe.get_cell(2, 2) == Cell.ALIVE

    def test_dead_cells_without_three_neighbors_stay_dead(self):
        """Test dead cells with other counts are unchanged."""
        universe = Universe.from_rows([".....", ".**..", ".....", ".....", "....."])
        universe.tick()
        assert universe.get_cell(2, 2) == Cell.DEAD
        assert universe.get_cell(0, 0) == Cell.DEAD

    def test_horizontal_blinker_becomes_vertical(self):
        """Test the blinker oscillator on a 5x5 torus."""
        universe = Universe.from_rows([".....", ".....", ".***.", ".....", "....."])
        universe.tick()
        assert universe == Universe.from_rows([".....", "..*..", "..*..", "..*..", "....."])

        universe.tick()
        assert universe == Universe.from_rows([".....", ".....", ".***.", ".....", "....."])
        assert universe.generation == 2

    def test_blinker_on_three_by_three_torus(self):
        """Test that on a 3x3 torus every cell neighbors all the others."""
        universe = Universe.from_rows(["...", "***", "..."])
        for row in range(3):
            for column in range(3):
                expected = 3 - (1 if universe.get_cell(row, column) == Cell.ALIVE else 0)
                assert universe.live_neighbor_count(row, column) == expected

        # Every dead cell sees 3 alive cells, so the whole universe fills
        universe.tick()
        assert universe.population == 9

        # Then every cell has 8 neighbors and dies
        universe.tick()
        assert universe.population == 0

    def test_snapshot_isolation(self):
        """Test the next generation is computed only from the previous one."""
        rows = [".*....", "..*...", "***...", "......", "......", "......"]
        universe = Universe.from_rows(rows)
        expected = reference_tick(universe)

        naive = Universe.from_rows(rows)
        in_place_tick(naive)

        universe.tick()
        assert universe == expected
        assert universe != naive

    def test_matches_reference_on_default_universe(self):
        """Test a vectorized tick agrees with the cell-by-cell rule."""
        universe = Universe.new()
        for _ in range(3):
            expected = reference_tick(universe)
            universe.tick()
            assert universe == expected

    def test_rule_determinism(self):
        """Test identical generations produce identical successors."""
        first = Universe.new()
        second = Universe.new()
        for _ in range(5):
            first.tick()
            second.tick()
        assert first == second
        assert first.render() == second.render()

    def test_size_invariant_across_ticks(self):
        """Test the cell buffer keeps its size across generations."""
        universe = Universe(9, 6)
        for generation in range(1, 11):
            universe.tick()
            assert len(universe.cells) == 54
            assert universe.generation == generation

    def test_glider_crosses_edge(self):
        """Test a glider wraps around the torus back to its start."""
        rows = [".*....", "..*...", "***...", "......", "......", "......"]
        universe = Universe.from_rows(rows)
        # Glider moves one cell diagonally every 4 generations
        for _ in range(4 * 6):
            universe.tick()
        assert universe == Universe.from_rows(rows)


class TestRender:
    """Test cases for the text rendering."""

    def test_render_shape(self):
        """Test rendering has height lines of width glyphs."""
        universe = Universe(7, 4)
        text = universe.render()
        assert text.endswith("\n")

        lines = text.split("\n")[:-1]
        assert len(lines) == 4
        for line in lines:
            assert len(line) == 7
            assert set(line) <= {DEAD_GLYPH, ALIVE_GLYPH}

    def test_render_ascii(self):
        """Test rendering with custom glyphs."""
        universe = Universe.from_rows([".*.", "..*", "***"])
        assert universe.render(".", "*") == ".*.\n..*\n***\n"

    def test_render_default_first_row(self):
        """Test the seeded first row renders as expected."""
        universe = Universe.new()
        expected = "".join(ALIVE_GLYPH if (i % 2 == 0 or i % 7 == 0) else DEAD_GLYPH for i in range(64))
        assert universe.render().split("\n")[0] == expected

    def test_str_is_render(self):
        """Test string conversion uses the default rendering."""
        universe = Universe(4, 2)
        assert str(universe) == universe.render()

    def test_repr(self):
        """Test repr shows dimensions and progress."""
        universe = Universe.from_rows(["*.", ".."])
        assert repr(universe) == "Universe(width=2, height=2, generation=0, population=1)"


class TestEquality:
    """Test cases for universe comparison."""

    def test_equality(self):
        """Test universes compare by dimensions and cells."""
        assert Universe(4, 4) == Universe(4, 4)
        assert Universe(4, 4) != Universe(4, 5)

        changed = Universe(4, 4)
        changed.set_cell(0, 1, Cell.ALIVE)
        assert changed != Universe(4, 4)

        assert Universe(4, 4) != "not a universe"
