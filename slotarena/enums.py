"""Enumerations and screen dimensions shared by the game."""

from enum import IntEnum

SCREEN_WIDTH = 720
SCREEN_HEIGHT = 1220


class Layer(IntEnum):
    """Scene layers, in update and render order."""

    DEFAULT = 0
    BACKGROUND = 1
    PLAYER = 2
    PROJECTILE = 3
    ENEMY = 4


class PenType(IntEnum):
    HOLLOW = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4


class BrushType(IntEnum):
    HOLLOW = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4


class EventType(IntEnum):
    CREATE_OBJECT = 0
    DELETE_OBJECT = 1
    SCENE_CHANGE = 2


class EnemyType(IntEnum):
    TRADIAN = 0
    ELEVEN = 1
    XSLIDE = 2
    ORAGE = 3
    DOLL = 4
    BOSS = 5