"""Battery inventory: the overlay where series and parallel counts are tuned."""

from __future__ import annotations

from .enums import SCREEN_HEIGHT, SCREEN_WIDTH
from .keyboard import InputManager, KeyType
from .vec2 import Rect, Vec2

BUTTON_SIZE = Vec2(120, 60)
MAX_SERIES = 50
MAX_PARALLEL = 10
MIN_COUNT = 1


class Button:
    """A clickable rectangle centred on ``pos``."""

    def __init__(self, size: Vec2 | None = None, pos: Vec2 | None = None) -> None:
        self.size = size if size is not None else Vec2()
        self.pos = pos if pos is not None else Vec2()

    def rect(self) -> Rect:
        """Edges of the button, from the truncated centre."""
        cx = int(self.pos.x)
        cy = int(self.pos.y)
        return Rect(
            int(cx - self.size.x / 2),
            int(cy - self.size.y / 2),
            int(cx + self.size.x / 2),
            int(cy + self.size.y / 2),
        )

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside; right and bottom edges are excluded."""
        r = self.rect()
        px = int(point.x)
        py = int(point.y)
        return r.left <= px < r.right and r.top <= py < r.bottom

    def __repr__(self) -> str:
        return f"Button(size={self.size!r}, pos={self.pos!r})"


class InventoryManager:
    """Holds the battery layout and the buttons that change it."""

    def __init__(self) -> None:
        self.inventory_size = SCREEN_WIDTH
        self.active = False
        self.seri_count = 1
        self.para_count = 1
        self.battery_count = 0

        x = SCREEN_WIDTH // 5 - SCREEN_WIDTH // 64
        y = int((SCREEN_HEIGHT - self.inventory_size // 2) + BUTTON_SIZE.y)
        step = SCREEN_WIDTH // 8 + BUTTON_SIZE.x / 2
        self.add_seri_button = Button(BUTTON_SIZE, Vec2(x, y))
        self.sub_seri_button = Button(BUTTON_SIZE, Vec2(x + step, y))
        self.add_para_button = Button(BUTTON_SIZE, Vec2(x + 2 * step, y))
        self.sub_para_button = Button(BUTTON_SIZE, Vec2(x + 3 * step, y))

    @property
    def power_count(self) -> int:
        """Cells in series: the damage of each shot."""
        return self.seri_count

    @property
    def gage_count(self) -> int:
        """Cells in parallel: the number of bullets per shot."""
        return self.para_count

    def show(self) -> None:
        self.active = True

    def hide(self) -> None:
        self.active = False

    def toggle(self) -> None:
        if self.active:
            self.hide()
        else:
            self.show()

    def click(self, mouse_pos: Vec2) -> None:
        """Apply a click at ``mouse_pos`` to the series and parallel buttons."""
        self._click_series(mouse_pos)
        self._click_parallel(mouse_pos)

    def _click_series(self, mouse_pos: Vec2) -> None:
        if self.add_seri_button.contains(mouse_pos):
            if self.seri_count >= MAX_SERIES:
                return
            self.battery_count -= 1
            self.seri_count += 1
        if self.sub_seri_button.contains(mouse_pos):
            if self.seri_count <= MIN_COUNT:
                return
            self.battery_count += 1
            self.seri_count -= 1

    def _click_parallel(self, mouse_pos: Vec2) -> None:
        if self.add_para_button.contains(mouse_pos):
            if self.para_count >= MAX_PARALLEL:
                return
            self.battery_count -= 1
            self.para_count += 1
        if self.sub_para_button.contains(mouse_pos):
            if self.para_count <= MIN_COUNT:
                return
            self.battery_count += 1
            self.para_count -= 1

    def update(self, input_manager: InputManager) -> None:
        """Handle a left click made this frame while the inventory is open."""
        if self.active and input_manager.is_down(KeyType.LBUTTON):
            self.click(input_manager.mouse_pos)