import pygame
from snake_game.snake import UP, DOWN, LEFT, RIGHT

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}
PAUSE_KEYS = (pygame.K_p, pygame.K_SPACE)
MUTE_KEYS = (pygame.K_m,)

ACTION_TURN = "turn"
ACTION_RESTART = "restart"
ACTION_PAUSE = "pause"
ACTION_MUTE = "mute"


def handle_key(state, key):
    """Apply a key press to the game state and report what it did.

    Arrow keys buffer a direction (reversals are dropped). Once the game is
    over any other key restarts it; while running, pause and mute keys are
    reported back to the caller and everything else is ignored.
    """
    direction = KEY_DIRECTIONS.get(key)
    if direction is not None:
        if state.snake.request_direction(direction):
            return ACTION_TURN
        return None

    if not state.running:
        state.reset()
        return ACTION_RESTART

    if key in PAUSE_KEYS:
        return ACTION_PAUSE
    if key in MUTE_KEYS:
        return ACTION_MUTE
    return None
