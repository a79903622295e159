WINDOW_WIDTH = 720
WINDOW_HEIGHT = 800
TITLE_HEIGHT = 64

FPS = 8
RENDER_FPS = 60

# Desired number of tiles per side; tile size is derived from the window
GRID_SIZE = 10
# Share of the smaller window side used by the board
VIEWPORT_FILL = 0.9
MIN_TILE_SIZE = 4

# True: hitting an edge ends the game. False: the snake goes through walls
WALL_COLLISIONS = False

INITIAL_LENGTH = 4
# (column, row) of the head at start, or None for the centre of the grid
START_POSITION = None

FOOD_SPAWN_ATTEMPTS = 100

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (85, 85, 85)
RED = (255, 50, 50)
YELLOW = (255, 255, 0)
MUSTARD = (241, 194, 50)
CYAN = (5, 171, 215)
DARK_GREY = (50, 50, 50)

BACKGROUND_COLOR = MUSTARD
TILE_COLOR = WHITE
FOOD_COLOR = CYAN
BODY_COLOR = GREY
HEAD_COLOR = BLACK
TITLE_BAR_COLOR = DARK_GREY
TITLE_TEXT_COLOR = WHITE

# Tone frequencies (Hz) for generated sound effects
START_TONE = 880
EAT_TONE = 660
DIE_TONE = 220
SOUND_VOLUME = 0.25
