import random
import unittest

from snake_game.grid import Grid


class TestGrid(unittest.TestCase):

    def test_from_viewport_fits_board(self):
        grid = Grid.from_viewport(720, 736, 10)
        # 720 * 0.9 = 648 -> 64px tiles
        self.assertEqual(grid.tile_size, 64)
        self.assertEqual(grid.tile_count_x, 10)
        self.assertEqual(grid.tile_count_y, 10)
        self.assertEqual(grid.width, grid.tile_size * grid.tile_count_x)
        self.assertEqual(grid.height, grid.tile_size * grid.tile_count_y)
        self.assertLessEqual(grid.width, 720)

    def test_from_viewport_uses_smaller_side(self):
        grid = Grid.from_viewport(1000, 200, 10)
        self.assertEqual(grid.tile_size, 18)

    def test_tiny_viewport_keeps_minimum_tile(self):
        grid = Grid.from_viewport(5, 5, 10)
        self.assertGreaterEqual(grid.tile_size, 1)

    def test_contains(self):
        grid = Grid(10, 10, 10)
        self.assertTrue(grid.contains(0, 0))
        self.assertTrue(grid.contains(90, 90))
        self.assertFalse(grid.contains(100, 0))
        self.assertFalse(grid.contains(0, -10))

    def test_wrap_to_opposite_edge(self):
        grid = Grid(10, 10, 10)
        self.assertEqual(grid.wrap(100, 50), (0, 50))
        self.assertEqual(grid.wrap(-10, 50), (90, 50))
        self.assertEqual(grid.wrap(50, 100), (50, 0))
        self.assertEqual(grid.wrap(50, -10), (50, 90))
        self.assertEqual(grid.wrap(40, 40), (40, 40))

    def test_cells_cover_board(self):
        grid = Grid(10, 3, 2)
        cells = list(grid.cells())
        self.assertEqual(len(cells), grid.cell_count)
        self.assertEqual(len(set(cells)), 6)
        self.assertIn((20, 10), cells)

    def test_random_cell_is_on_grid(self):
        grid = Grid(7, 5, 5)
        rng = random.Random(3)
        for _ in range(50):
            x, y = grid.random_cell(rng)
            self.assertEqual(x % 7, 0)
            self.assertEqual(y % 7, 0)
            self.assertTrue(grid.contains(x, y))

    def test_pixel_cell_conversion(self):
        grid = Grid(12, 10, 10)
        self.assertEqual(grid.cell_to_pixel(3, 4), (36, 48))
        self.assertEqual(grid.pixel_to_cell(36, 48), (3, 4))


if __name__ == '__main__':
    unittest.main()
