import random
from config import WINDOW_WIDTH, WINDOW_HEIGHT, TITLE_HEIGHT
from snake_game.grid import Grid
from snake_game.snake import Snake, RIGHT
from snake_game.food import Food
from snake_game.settings import GameSettings

RUNNING = "running"
OVER = "over"

# Tick outcomes reported to the caller (sound effects, console output)
EVENT_EAT = "eat"
EVENT_OVER = "over"


class GameState:
    """Everything one game owns: grid, snake, food, score and status."""

    def __init__(self, settings=None, viewport=(WINDOW_WIDTH, WINDOW_HEIGHT - TITLE_HEIGHT), rng=None):
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random()
        self.viewport = viewport
        self.reset()

    def reset(self):
        """Full reinitialisation: new grid, snake, food and score."""
        self.grid = Grid.from_viewport(self.viewport[0], self.viewport[1], self.settings.grid_size)
        x, y = self.grid.cell_to_pixel(*self.settings.start_cell())
        self.snake = Snake(x, y, self.settings.initial_length, RIGHT)
        self.food = Food()
        self.score = 0
        self.status = RUNNING
        self.game_over_reason = None
        self.place_food()

    def resize(self, width, height):
        """Rebuild the grid for a new viewport and realign snake and food."""
        self.viewport = (width, height)
        self.grid = Grid.from_viewport(width, height, self.settings.grid_size)
        x, y = self.grid.cell_to_pixel(*self.settings.start_cell())
        self.snake.reset(x, y, self.snake.velocity)
        if self.running:
            self.place_food()
        elif not self.food.respawn(self.grid, self.snake, self.rng, self.settings.food_spawn_attempts):
            # Ended game on a full board: keep the food on the nearest tile of the new grid
            col, row = self.grid.pixel_to_cell(max(0, self.food.x), max(0, self.food.y))
            col = min(col, self.grid.tile_count_x - 1)
            row = min(row, self.grid.tile_count_y - 1)
            self.food.x, self.food.y = self.grid.cell_to_pixel(col, row)

    @property
    def running(self):
        return self.status == RUNNING

    def game_over(self, reason):
        self.status = OVER
        self.game_over_reason = reason

    def place_food(self):
        """Respawn food; a board with no free tile ends the game."""
        placed = self.food.respawn(self.grid, self.snake, self.rng, self.settings.food_spawn_attempts)
        if not placed:
            self.game_over("board full")
        return placed

    def tick(self):
        """Advance the simulation by one step.

        Returns EVENT_EAT, EVENT_OVER or None.
        """
        if not self.running:
            return None

        snake = self.snake
        snake.apply_pending_direction()
        snake.advance(self.grid.tile_size)

        if self.settings.wall_collisions:
            if not self.grid.contains(snake.x, snake.y):
                self.game_over("wall")
                return EVENT_OVER
        else:
            snake.x, snake.y = self.grid.wrap(snake.x, snake.y)

        if snake.hits_body():
            self.game_over("tail")
            return EVENT_OVER

        event = None
        if self.food.check_collision(snake.head):
            self.score += 1
            snake.grow()
            if not self.place_food():
                event = EVENT_OVER
            else:
                event = EVENT_EAT

        snake.record_position()
        return event
