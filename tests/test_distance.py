"""Tests for distance calculations."""

from territory.utils import manhattan_distance


class TestManhattanDistance:
    """Test Manhattan distance calculation."""

    def test_distance_same_point(self):
        assert manhattan_distance(5, 5, 5, 5) == 0

    def test_distance_horizontal(self):
        assert manhattan_distance(0, 4, 9, 4) == 9
        assert manhattan_distance(9, 4, 0, 4) == 9

    def test_distance_vertical(self):
        assert manhattan_distance(2, 0, 2, 7) == 7

    def test_distance_diagonal_sums_axes(self):
        """Diagonal offsets cost both axes."""
        assert manhattan_distance(0, 0, 3, 3) == 6
        assert manhattan_distance(0, 0, 3, 4) == 7

    def test_distance_symmetry(self):
        assert manhattan_distance(1, 2, 5, 8) == manhattan_distance(5, 8, 1, 2)
