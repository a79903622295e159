import pygame
from config import *


class Renderer:
    """Draws a GameState onto a pygame surface; keeps nothing between frames but fonts."""

    def __init__(self):
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, 44)
        self.small_font = pygame.font.Font(None, 24)

    def board_origin(self, screen, grid):
        """Top-left corner of the board, centred below the title bar."""
        width, height = screen.get_size()
        ox = max(0, (width - grid.width) // 2)
        oy = TITLE_HEIGHT + max(0, (height - TITLE_HEIGHT - grid.height) // 2)
        return (ox, oy)

    def draw_text(self, screen, text, pos, color=TITLE_TEXT_COLOR, font=None):
        """Draw text centred on pos."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=pos)
        screen.blit(text_surface, text_rect)

    def draw_background(self, screen, grid, origin):
        """Fill the board and draw one tile per cell with a one pixel gap."""
        ox, oy = origin
        pygame.draw.rect(screen, BACKGROUND_COLOR, (ox, oy, grid.width, grid.height))
        size = grid.tile_size - 1
        for x, y in grid.cells():
            pygame.draw.rect(screen, TILE_COLOR, (ox + x, oy + y, size, size))

    def draw_title(self, screen, state, paused=False, muted=False):
        """Score label, or the final score once the game is over."""
        width = screen.get_width()
        pygame.draw.rect(screen, TITLE_BAR_COLOR, (0, 0, width, TITLE_HEIGHT))
        center = (width // 2, TITLE_HEIGHT // 2)
        if state.running:
            self.draw_text(screen, str(state.score), center)
        else:
            self.draw_text(screen, f"GAME OVER  {state.score}", center, RED)

        if paused:
            self.draw_text(screen, "PAUSED", (60, TITLE_HEIGHT // 2), YELLOW, self.small_font)
        if muted:
            self.draw_text(screen, "MUTED", (width - 60, TITLE_HEIGHT // 2), RED, self.small_font)

    def draw_game_over(self, screen, origin, grid):
        """Hint drawn over the board once the game has ended."""
        ox, oy = origin
        overlay = pygame.Surface((grid.width, grid.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        screen.blit(overlay, origin)
        self.draw_text(screen, "Press any key to restart",
                       (ox + grid.width // 2, oy + grid.height // 2), WHITE, self.small_font)

    def draw(self, screen, state, paused=False, muted=False):
        """Redraw the whole frame from the current state."""
        grid = state.grid
        origin = self.board_origin(screen, grid)
        screen.fill(BLACK)
        self.draw_background(screen, grid, origin)
        state.food.draw(screen, origin, grid.tile_size)
        # a head that ran into the wall stays off the board
        state.snake.draw(screen, origin, grid.tile_size, grid.contains(*state.snake.head))
        self.draw_title(screen, state, paused, muted)
        if not state.running:
            self.draw_game_over(screen, origin, grid)
