import pygame, random
from config import *


class Food:
    """Single food item placed on a free grid tile."""

    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y

    @property
    def position(self):
        return (self.x, self.y)

    def respawn(self, grid, snake, rng=random, attempts=FOOD_SPAWN_ATTEMPTS):
        """Move food to a random tile not covered by the snake.

        Draws random tiles up to ``attempts`` times, then picks among the free
        tiles directly. Returns False when the board has no room left, in
        which case the position is left unchanged.
        """
        if snake.length >= grid.cell_count:
            return False

        for _ in range(attempts):
            position = grid.random_cell(rng)
            if not snake.occupies(position):
                self.x, self.y = position
                return True

        free = [cell for cell in grid.cells() if not snake.occupies(cell)]
        if not free:
            return False
        self.x, self.y = rng.choice(free)
        return True

    def check_collision(self, snake_head):
        """Check if the snake head sits on the food."""
        return snake_head == self.position

    def draw(self, screen, origin, tile_size):
        ox, oy = origin
        radius = tile_size // 2
        pygame.draw.circle(screen, FOOD_COLOR, (ox + self.x + radius, oy + self.y + radius), radius)
