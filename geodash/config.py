"""Game-wide constants and enumerations."""

from enum import Enum, auto

# Window
WINDOW_SIZE = (800.0, 900.0)
INFO_HEIGHT = 100.0
TEXT_SIZE = 30

# Menu buttons
BUTTON_SIZE = (100.0, 100.0)
ICON_BUTTON_SIZE = (70.0, 70.0)

LOC_START = (80.0, 700.0)
LOC_EXIT = (260.0, 700.0)
LOC_HELP = (440.0, 700.0)
LOC_STORE = (620.0, 700.0)

LOC_WATCH = (0.0, 830.0)
LOC_GIT_HUB = (730.0, 830.0)

LOC_DONE = (320.0, 770.0)
LOC_CANCEL = (410.0, 770.0)

# Store characters
BUY_PLAYER_SIZE = (140.0, 140.0)

LOC_PLAYER_ALPHA = (160.0, 295.0)
LOC_PLAYER_BETA = (330.0, 295.0)
LOC_PLAYER_GAMMA = (500.0, 295.0)
LOC_PLAYER_DELTA = (160.0, 490.0)
LOC_PLAYER_EPSILON = (330.0, 490.0)
LOC_PLAYER_ZETA = (500.0, 490.0)

COST_PLAYER_ALPHA = 50
COST_PLAYER_BETA = 100
COST_PLAYER_GAMMA = 150
COST_PLAYER_DELTA = 200
COST_PLAYER_EPSILON = 250
COST_PLAYER_ZETA = 300

# Movement
UP = (0.0, -1.0)
DOWN = (0.0, 1.0)

SPEED = 150
MAX_JUMP = 200
JUMP_SPEED = 350
SAFE_X = 80.0
PLAYER_VIEW_OFFSET_X = 0.25

# Collision tolerances
NEAR = 10.0
VERY_NEAR = 1.0

# Level file symbols
SYMBOL_PLAYER = "p"
SYMBOL_ENEMY = "@"
SYMBOL_OBSTACLE = "X"
SYMBOL_EXIT_DOOR = "D"
SYMBOL_PLATFORM = "#"
SYMBOL_NONE = " "
SYMBOL_GIFT = "G"


class GameObjectType(Enum):
    """Images used by the menu buttons."""

    START = auto()
    STORE = auto()
    HELP = auto()
    EXIT = auto()
    WATCH = auto()
    GITHUB = auto()
    DONE = auto()
    CANCEL = auto()
    PLAYER_ONE = auto()


class TypeObject(Enum):
    """Images and characters used by game objects."""

    SPRITE_SHEET = auto()
    ENEMY = auto()
    OBSTACLE = auto()
    PLAYER = auto()
    PLAYER_CHARACTERS = auto()
    EXIT_DOOR = auto()
    GIFT = auto()
    PLATFORM = auto()
    PLAYER_ALPHA = auto()
    PLAYER_BETA = auto()
    PLAYER_GAMMA = auto()
    PLAYER_DELTA = auto()
    PLAYER_EPSILON = auto()
    PLAYER_ZETA = auto()
    LOCK = auto()


class MenuAction(Enum):
    """Outcome of a click in a menu."""

    NONE = auto()
    START_LEVEL = auto()
    EXIT_GAME = auto()
    OPEN_STORE = auto()
    SHOW_HELP = auto()
    DONE = auto()
    CANCEL = auto()
    BUY_SUCCEED = auto()