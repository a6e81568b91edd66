"""Enemy kinds and the state machines that drive them."""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum, auto

from .collider import Collider
from .enums import EnemyType, Layer
from .events import EventManager
from .gameobject import GameObject
from .pathfinder import AStarPathFinder
from .projectile import EnemyBullet, Projectile
from .scene import Scene
from .vec2 import PI, Vec2

DASH_PHASE = 0.6
ENEMY_BULLET_SIZE = Vec2(30.0, 30.0)


class EnemyState(Enum):
    CHASE = auto()
    CAN_ATTACK = auto()
    ATTACK = auto()


class Enemy(GameObject):
    """Base of all enemies: a target to chase and damage taken from player bullets."""

    enemy_type: EnemyType | None = None

    def __init__(self, events: EventManager, scene: Scene) -> None:
        super().__init__()
        self.events = events
        self.scene = scene
        self.name = "Enemy"
        self.target: GameObject | None = None
        self.atk_timer = 0.0
        self.state = EnemyState.CHASE

    def set_target(self, target: GameObject) -> None:
        self.target = target

    def _require_target(self) -> GameObject:
        if self.target is None:
            raise RuntimeError("enemy has no target")
        return self.target

    def _path_finder(self) -> AStarPathFinder | None:
        return self.get_component(AStarPathFinder)

    def _chase(self, target_pos: Vec2) -> None:
        finder = self._path_finder()
        if finder is not None:
            finder.set_destination(target_pos)

    def _stop(self) -> None:
        finder = self._path_finder()
        if finder is not None:
            finder.stop()

    def _add_collider(self) -> None:
        collider = self.add_component(Collider())
        collider.size = self.size

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the enemy's behaviour by ``dt`` seconds."""

    def enter_collision(self, other: Collider) -> None:
        """Take damage from a player bullet; queue deletion when health runs out."""
        owner = other.owner
        if owner is None or owner.name != "PlayerBullet":
            return
        if isinstance(owner, Projectile):
            self.stat.hp -= int(owner.damage)
            if self.stat.hp <= 0:
                self.events.delete_object(self)


class MeleeEnemy(Enemy):
    """Chases the target and hits it at close range once per cooldown."""

    def update(self, dt: float) -> None:
        target = self._require_target()
        distance = (target.pos - self.pos).length()
        if self.state is EnemyState.CHASE:
            self._chase(target.pos)
            if distance <= self.stat.atk_range:
                self._stop()
                self.state = EnemyState.ATTACK
        elif self.state is EnemyState.ATTACK:
            self.atk_timer += dt
            if self.atk_timer > self.stat.atk_cooldown:
                self.atk_timer = 0.0
                target.apply_damage(self.stat.atk_damage)
            if distance > self.stat.atk_range:
                self.state = EnemyState.CHASE


def _set_melee_stats(enemy: Enemy) -> None:
    enemy.stat.hp = 5
    enemy.stat.move_speed = 100.0
    enemy.stat.atk_range = 50.0
    enemy.stat.atk_cooldown = 1.0
    enemy.stat.atk_damage = 5
    enemy.size = Vec2(30, 30)


class DollEnemy(MeleeEnemy):
    enemy_type = EnemyType.DOLL

    def __init__(self, events: EventManager, scene: Scene) -> None:
        super().__init__(events, scene)
        _set_melee_stats(self)


class TradianEnemy(MeleeEnemy):
    enemy_type = EnemyType.TRADIAN

    def __init__(self, events: EventManager, scene: Scene) -> None:
        super().__init__(events, scene)
        _set_melee_stats(self)


class ElevenEnemy(Enemy):
    """Ranged enemy: aims a growing warning line, then fires a bullet."""

    enemy_type = EnemyType.ELEVEN

    def __init__(self, events: EventManager, scene: Scene) -> None:
        super().__init__(events, scene)
        self.stat.hp = 3
        self.stat.move_speed = 75.0
        self.stat.atk_range = 200.0
        self.stat.atk_cooldown = 1.5
        self.stat.atk_delay = 0.5
        self.stat.atk_damage = 5
        self.size = Vec2(20, 20)
        self._add_collider()
        self.warn_distance = 0.0
        self.atk_dir = Vec2()

    def update(self, dt: float) -> None:
        target = self._require_target()
        offset = target.pos - self.pos
        direction = offset.normalized()
        distance = offset.length()

        if self.state is EnemyState.CHASE:
            self._chase(target.pos)
            if distance <= self.stat.atk_range:
                self._stop()
                self.state = EnemyState.CAN_ATTACK
        elif self.state is EnemyState.CAN_ATTACK:
            self.atk_timer += dt
            if self.atk_timer <= self.stat.atk_delay:
                self.atk_dir = direction
                self.warn_distance = distance * self.atk_timer / self.stat.atk_delay
            elif self.warn_distance > 0:
                self.warn_distance = 0.0
                self.state = EnemyState.ATTACK
            if self.atk_timer > self.stat.atk_cooldown:
                self.atk_timer = 0.0
            if distance > self.stat.atk_range:
                self.atk_timer = 0.0
                self.warn_distance = 0.0
                self.state = EnemyState.CHASE
        elif self.state is EnemyState.ATTACK:
            self._fire()
            self.state = EnemyState.CAN_ATTACK

    def _fire(self) -> EnemyBullet:
        bullet = EnemyBullet(self.events)
        bullet.pos = self.pos
        bullet.size = ENEMY_BULLET_SIZE
        bullet.damage = self.stat.atk_damage
        bullet.direction = self.atk_dir
        bullet.name = "EnemyBullet"
        self.scene.add_object(bullet, Layer.PROJECTILE)
        return bullet


class XSlideEnemy(Enemy):
    """Dashes out toward the target and back again, spinning as it goes."""

    enemy_type = EnemyType.XSLIDE

    def __init__(self, events: EventManager, scene: Scene) -> None:
        super().__init__(events, scene)
        self.stat.hp = 3
        self.stat.move_speed = 75.0
        self.stat.atk_range = 300.0
        self.stat.atk_cooldown = 1.2
        self.stat.atk_delay = 0.2
        self.stat.atk_damage = 4
        self.size = Vec2(20, 20)
        self._add_collider()
        self.atk_dir = Vec2()
        self.rad = 0.0

    def update(self, dt: float) -> None:
        target = self._require_target()
        offset = target.pos - self.pos
        direction = offset.normalized()
        distance = offset.length()

        if self.state is EnemyState.CHASE:
            if distance > self.stat.atk_range:
                self._chase(target.pos)
            else:
                self._stop()
                self.state = EnemyState.CAN_ATTACK
        elif self.state is EnemyState.CAN_ATTACK:
            self.atk_timer += dt
            if self.atk_timer > self.stat.atk_delay:
                self.atk_timer = 0.0
                self.atk_dir = direction
                self.state = EnemyState.ATTACK
        elif self.state is EnemyState.ATTACK:
            self.rad += dt * PI
            self.atk_timer += dt
            step = self.atk_dir * dt / DASH_PHASE * self.stat.atk_range
            if self.atk_timer < DASH_PHASE:
                self.pos = self.pos + step
            elif self.atk_timer < 2 * DASH_PHASE:
                self.pos = self.pos - step
            else:
                self.atk_timer = -1.0
                self.state = EnemyState.CHASE


class OrageEnemy(Enemy):
    """An enemy with stats and a collider but no behaviour of its own."""

    enemy_type = EnemyType.ORAGE

    def __init__(self, events: EventManager, scene: Scene) -> None:
        super().__init__(events, scene)
        _set_melee_stats(self)
        self._add_collider()

    def update(self, dt: float) -> None:
        """Orage enemies stand still."""