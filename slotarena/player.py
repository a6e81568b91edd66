"""The player ship: movement, inventory toggling and firing."""

from __future__ import annotations

import math

from .enums import SCREEN_HEIGHT, SCREEN_WIDTH, Layer
from .events import EventManager
from .gameobject import GameObject
from .inventory import InventoryManager
from .keyboard import InputManager, KeyType
from .projectile import PlayerBullet
from .scene import Scene
from .vec2 import Vec2, deg2rad, rad2deg

PLAYER_SPEED = 200.0
ATTACK_COOLDOWN = 0.2
PLAYER_HEALTH = 30
BULLET_SPREAD = 5.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Player(GameObject):
    """The controllable object, kept inside the square play field."""

    def __init__(
        self,
        scene: Scene,
        events: EventManager,
        inventory: InventoryManager,
        input_manager: InputManager,
    ) -> None:
        super().__init__()
        self.scene = scene
        self.events = events
        self.inventory = inventory
        self.input = input_manager
        self.name = "Player"
        self.stat.hp = PLAYER_HEALTH
        self.atk_cooldown = ATTACK_COOLDOWN
        self.timer = 0.0
        self.enabled = True

    def update(self, dt: float) -> None:
        if self.input.is_down(KeyType.TAB):
            self.toggle_inventory()
        if not self.enabled:
            return

        dx = 0.0
        dy = 0.0
        if self.input.is_held(KeyType.A):
            dx = -1.0
        if self.input.is_held(KeyType.D):
            dx = 1.0
        if self.input.is_held(KeyType.W):
            dy = -1.0
        if self.input.is_held(KeyType.S):
            dy = 1.0

        if self.timer >= self.atk_cooldown and self.input.is_held(KeyType.LBUTTON):
            self.timer = 0.0
            self.create_projectiles()
        self.timer += dt

        moved = self.pos + Vec2(dx, dy).normalized() * dt * PLAYER_SPEED

        top = (SCREEN_HEIGHT - SCREEN_WIDTH) // 2
        bottom = SCREEN_HEIGHT // 2 + SCREEN_WIDTH // 2
        half_w = self.size.x / 2
        half_h = self.size.y / 2
        self.pos = Vec2(
            _clamp(moved.x, half_w, SCREEN_WIDTH - half_w),
            _clamp(moved.y, top + half_h, bottom - half_h),
        )

    def toggle_inventory(self) -> None:
        """Open or close the inventory; the player is frozen while it is open."""
        self.enabled = not self.enabled
        self.inventory.toggle()

    def create_projectiles(self) -> list[PlayerBullet]:
        """Fire a fan of bullets toward the mouse and add them to the scene."""
        count = self.inventory.gage_count
        damage = self.inventory.power_count
        spread = BULLET_SPREAD * (count - 1)
        aim = self.input.mouse_pos - self.pos
        base_deg = rad2deg(math.atan2(aim.y, aim.x)) - spread / 2

        fired = []
        for i in range(1, count + 1):
            bullet = PlayerBullet(self.events)
            bullet.pos = self.pos
            bullet.size = Vec2(30.0, 30.0)
            radian = deg2rad(base_deg + BULLET_SPREAD * i)
            bullet.damage = damage
            bullet.direction = Vec2(math.cos(radian), math.sin(radian))
            bullet.name = "PlayerBullet"
            self.scene.add_object(bullet, Layer.PROJECTILE)
            fired.append(bullet)
        return fired