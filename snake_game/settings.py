from config import (
    FPS,
    GRID_SIZE,
    WALL_COLLISIONS,
    INITIAL_LENGTH,
    START_POSITION,
    FOOD_SPAWN_ATTEMPTS,
)


class ConfigError(ValueError):
    """Raised when a game setting is invalid."""


def _is_int(value):
    # bool is an int subclass but never a valid count or coordinate
    return isinstance(value, int) and not isinstance(value, bool)


class GameSettings:
    """Validated game settings, defaulting to the values in config.py."""

    def __init__(self, grid_size=GRID_SIZE, fps=FPS, wall_collisions=WALL_COLLISIONS,
                 initial_length=INITIAL_LENGTH, start_position=START_POSITION,
                 food_spawn_attempts=FOOD_SPAWN_ATTEMPTS):
        self.grid_size = grid_size
        self.fps = fps
        self.wall_collisions = bool(wall_collisions)
        self.initial_length = initial_length
        self.start_position = start_position
        self.food_spawn_attempts = food_spawn_attempts
        self.validate()

    @property
    def frame_interval(self):
        """Milliseconds between two simulation ticks."""
        return 1000.0 / self.fps

    def validate(self):
        """Fail fast on settings the game cannot start with."""
        if not _is_int(self.grid_size) or self.grid_size < 1:
            raise ConfigError(f"grid_size must be a positive integer, got {self.grid_size!r}")
        if isinstance(self.fps, bool) or not isinstance(self.fps, (int, float)) or self.fps <= 0:
            raise ConfigError(f"fps must be a positive number, got {self.fps!r}")
        if not _is_int(self.initial_length) or self.initial_length < 1:
            raise ConfigError(f"initial_length must be a positive integer, got {self.initial_length!r}")
        if self.initial_length > self.grid_size * self.grid_size:
            raise ConfigError(
                f"initial_length {self.initial_length} does not fit a "
                f"{self.grid_size}x{self.grid_size} grid"
            )
        if not _is_int(self.food_spawn_attempts) or self.food_spawn_attempts < 0:
            raise ConfigError(
                f"food_spawn_attempts must be a non-negative integer, got {self.food_spawn_attempts!r}"
            )

        if self.start_position is None:
            return
        try:
            col, row = self.start_position
        except (TypeError, ValueError):
            raise ConfigError(
                f"start_position must be a (column, row) pair or None, got {self.start_position!r}"
            ) from None
        if not _is_int(col) or not _is_int(row):
            raise ConfigError(f"start_position must hold integers, got {self.start_position!r}")
        if not (0 <= col < self.grid_size and 0 <= row < self.grid_size):
            raise ConfigError(
                f"start_position {self.start_position!r} is outside the "
                f"{self.grid_size}x{self.grid_size} grid"
            )

    def start_cell(self):
        """Return the (column, row) the head starts on."""
        if self.start_position is None:
            return (self.grid_size // 2, self.grid_size // 2)
        return tuple(self.start_position)
