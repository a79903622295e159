import pygame
from config import *
from snake_game.state import GameState, EVENT_EAT, EVENT_OVER
from snake_game.settings import GameSettings
from snake_game.loop import FixedStep
from snake_game.controls import handle_key, ACTION_RESTART, ACTION_PAUSE, ACTION_MUTE
from snake_game.render import Renderer
from snake_game.audio import load_sounds


class SnakeGame:
    """Main game controller: window, event pump and fixed-step loop."""

    def __init__(self, settings=None):
        pygame.init()
        self.settings = settings or GameSettings()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer()

        self.state = GameState(self.settings, self.viewport_size())
        self.stepper = FixedStep(self.settings.fps, pygame.time.get_ticks())
        print(f"Board initialized: {self.state.grid.width}x{self.state.grid.height}")

        self.running = True
        self.paused = False
        self.muted = False
        self.sounds = load_sounds()
        self.play('start')

    def viewport_size(self):
        """Window area available to the board, below the title bar."""
        width, height = self.screen.get_size()
        return (width, max(1, height - TITLE_HEIGHT))

    def play(self, name):
        if not self.muted and name in self.sounds:
            self.sounds[name].play()

    def on_resize(self, width, height):
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.state.resize(*self.viewport_size())
        print(f"Board resized: {self.state.grid.width}x{self.state.grid.height}")

    def on_key(self, key):
        action = handle_key(self.state, key)
        if action == ACTION_RESTART:
            self.paused = False
            self.stepper.reset(pygame.time.get_ticks())
            self.play('start')
        elif action == ACTION_PAUSE:
            self.paused = not self.paused
        elif action == ACTION_MUTE:
            self.muted = not self.muted

    def update(self):
        """Advance one tick when the stepper allows it."""
        if self.paused or not self.state.running:
            return
        if not self.stepper.ready(pygame.time.get_ticks()):
            return

        event = self.state.tick()
        if event == EVENT_EAT:
            self.play('eat')
        elif event == EVENT_OVER:
            self.play('die')
            print(f"Game Over ({self.state.game_over_reason})! Score: {self.state.score}")

    def run(self):
        """Main game loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.on_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    self.on_key(event.key)

            self.update()
            self.renderer.draw(self.screen, self.state, self.paused, self.muted)
            pygame.display.flip()
            self.clock.tick(RENDER_FPS)

        self.cleanup()

    def cleanup(self):
        """Clean up resources."""
        self.running = False
        pygame.quit()


def main():
    game = SnakeGame()
    game.run()
