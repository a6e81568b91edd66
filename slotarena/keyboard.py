"""Keyboard and mouse state tracked frame by frame."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, IntEnum, auto

from .vec2 import Vec2


class KeyType(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    Q = auto()
    W = auto()
    E = auto()
    R = auto()
    T = auto()
    Y = auto()
    U = auto()
    I = auto()  # noqa: E741
    O = auto()  # noqa: E741
    P = auto()
    A = auto()
    S = auto()
    D = auto()
    F = auto()
    G = auto()
    H = auto()
    J = auto()
    K = auto()
    L = auto()
    Z = auto()
    X = auto()
    C = auto()
    V = auto()
    B = auto()
    N = auto()
    M = auto()
    CTRL = auto()
    LALT = auto()
    LSHIFT = auto()
    SPACE = auto()
    ENTER = auto()
    TAB = auto()
    ESC = auto()
    LBUTTON = auto()
    RBUTTON = auto()
    NUM_1 = auto()
    NUM_2 = auto()


class KeyState(IntEnum):
    NONE = 0
    DOWN = 1
    UP = 2
    PRESS = 3


class InputManager:
    """Turns the set of pressed keys each frame into per-key transitions."""

    def __init__(self) -> None:
        self._states = {key: KeyState.NONE for key in KeyType}
        self._was_pressed = {key: False for key in KeyType}
        self.mouse_pos = Vec2()

    def update(
        self,
        pressed: Iterable[KeyType],
        focused: bool = True,
        mouse_pos: Vec2 | None = None,
    ) -> None:
        """Record this frame's pressed keys; without focus every key is released."""
        if not focused:
            for key in KeyType:
                self._was_pressed[key] = False
                self._states[key] = KeyState.NONE
            return
        down = set(pressed)
        for key in KeyType:
            was = self._was_pressed[key]
            if key in down:
                self._states[key] = KeyState.PRESS if was else KeyState.DOWN
                self._was_pressed[key] = True
            else:
                self._states[key] = KeyState.UP if was else KeyState.NONE
                self._was_pressed[key] = False
        if mouse_pos is not None:
            self.mouse_pos = mouse_pos

    def key(self, key_type: KeyType) -> KeyState:
        return self._states[key_type]

    def is_down(self, key_type: KeyType) -> bool:
        """Whether the key went down this frame."""
        return self._states[key_type] is KeyState.DOWN

    def is_held(self, key_type: KeyType) -> bool:
        """Whether the key has been held since an earlier frame."""
        return self._states[key_type] is KeyState.PRESS

    def is_up(self, key_type: KeyType) -> bool:
        """Whether the key was released this frame."""
        return self._states[key_type] is KeyState.UP