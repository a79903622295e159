from config import VIEWPORT_FILL, MIN_TILE_SIZE


class Grid:
    """Square tile grid; positions are pixel coordinates of a tile's top-left corner."""

    def __init__(self, tile_size, tile_count_x, tile_count_y):
        self.tile_size = tile_size
        self.tile_count_x = tile_count_x
        self.tile_count_y = tile_count_y

    @classmethod
    def from_viewport(cls, width, height, grid_size, fill=VIEWPORT_FILL):
        """Fit a grid_size x grid_size board into the given viewport.

        The board is the largest square that is a multiple of grid_size and
        covers ``fill`` of the smaller viewport side, so tile_size * grid_size
        always equals the board side.
        """
        size = min(width, height) * fill
        tile_size = max(MIN_TILE_SIZE, int(size // grid_size))
        return cls(tile_size, grid_size, grid_size)

    @property
    def width(self):
        return self.tile_size * self.tile_count_x

    @property
    def height(self):
        return self.tile_size * self.tile_count_y

    @property
    def cell_count(self):
        return self.tile_count_x * self.tile_count_y

    def cell_to_pixel(self, col, row):
        return (col * self.tile_size, row * self.tile_size)

    def pixel_to_cell(self, x, y):
        return (x // self.tile_size, y // self.tile_size)

    def contains(self, x, y):
        """Check that a position lies on the board."""
        return 0 <= x <= self.width - self.tile_size and 0 <= y <= self.height - self.tile_size

    def wrap(self, x, y):
        """Move a position that left the board to the opposite edge."""
        if x > self.width - self.tile_size:
            x = 0
        elif x < 0:
            x = self.width - self.tile_size
        if y > self.height - self.tile_size:
            y = 0
        elif y < 0:
            y = self.height - self.tile_size
        return (x, y)

    def random_cell(self, rng):
        col = rng.randrange(self.tile_count_x)
        row = rng.randrange(self.tile_count_y)
        return self.cell_to_pixel(col, row)

    def cells(self):
        """Yield every tile position, row by row."""
        for row in range(self.tile_count_y):
            for col in range(self.tile_count_x):
                yield self.cell_to_pixel(col, row)

    def __repr__(self):
        return f"Grid({self.tile_count_x}x{self.tile_count_y}, tile={self.tile_size})"
