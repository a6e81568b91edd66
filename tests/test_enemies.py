import pytest

from slotarena.astar import AStarGrid
from slotarena.collider import Collider
from slotarena.enums import EnemyType, EventType, Layer
from slotarena.events import Event, EventManager
from slotarena.enemies import (
    DollEnemy,
    ElevenEnemy,
    EnemyState,
    OrageEnemy,
    TradianEnemy,
    XSlideEnemy,
)
from slotarena.gameobject import GameObject
from slotarena.pathfinder import AStarPathFinder
from slotarena.projectile import EnemyBullet, PlayerBullet
from slotarena.scene import Scene
from slotarena.vec2 import Vec2


class _Scene(Scene):
    def init(self):
        pass


class _Target(GameObject):
    def update(self, dt):
        pass


def _target(pos, hp=30):
    target = _Target()
    target.pos = pos
    target.stat.hp = hp
    return target


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def scene():
    return _Scene()


@pytest.mark.parametrize("cls", [DollEnemy, TradianEnemy])
def test_melee_stats(events, scene, cls):
    enemy = cls(events, scene)
    assert enemy.stat.hp == 5
    assert enemy.stat.atk_range == 50.0
    assert enemy.stat.atk_damage == 5
    assert enemy.size == Vec2(30, 30)
    assert enemy.get_component(Collider) is None


def test_enemy_types(events, scene):
    assert DollEnemy(events, scene).enemy_type is EnemyType.DOLL
    assert ElevenEnemy(events, scene).enemy_type is EnemyType.ELEVEN
    assert XSlideEnemy(events, scene).enemy_type is EnemyType.XSLIDE


def test_update_without_target_raises(events, scene):
    with pytest.raises(RuntimeError):
        DollEnemy(events, scene).update(0.1)


def test_melee_attacks_after_cooldown(events, scene):
    enemy = DollEnemy(events, scene)
    enemy.pos = Vec2(100, 100)
    target = _target(Vec2(110, 100), hp=30)
    enemy.set_target(target)
    enemy.update(0.1)
    assert enemy.state is EnemyState.ATTACK
    enemy.update(0.5)
    assert target.stat.hp == 30
    enemy.update(0.6)
    assert target.stat.hp == 30 - enemy.stat.atk_damage
    assert enemy.atk_timer == 0.0


def test_melee_returns_to_chase(events, scene):
    enemy = TradianEnemy(events, scene)
    enemy.pos = Vec2(100, 100)
    target = _target(Vec2(110, 100))
    enemy.set_target(target)
    enemy.update(0.1)
    target.pos = Vec2(400, 400)
    enemy.update(0.1)
    assert enemy.state is EnemyState.CHASE


def test_melee_drives_path_finder(events, scene):
    enemy = DollEnemy(events, scene)
    finder = enemy.add_component(AStarPathFinder(AStarGrid(10)))
    enemy.pos = Vec2(100, 400)
    target = _target(Vec2(600, 800))
    enemy.set_target(target)
    enemy.update(0.1)
    assert finder.target_node is not None
    assert enemy.state is EnemyState.CHASE
    finder.start()
    target.pos = Vec2(110, 400)
    enemy.update(0.1)
    assert finder.is_stopped
    assert enemy.state is EnemyState.ATTACK


def test_player_bullet_damages_and_kills(events, scene):
    enemy = DollEnemy(events, scene)
    bullet = PlayerBullet(events)
    bullet.damage = 2
    hit = bullet.get_component(Collider)
    enemy.enter_collision(hit)
    assert enemy.stat.hp == 3
    assert events.pending == ()
    bullet.damage = 5
    enemy.enter_collision(hit)
    assert enemy.stat.hp <= 0
    assert events.pending == (Event(EventType.DELETE_OBJECT, enemy),)


def test_other_projectiles_do_not_damage(events, scene):
    enemy = DollEnemy(events, scene)
    bullet = EnemyBullet(events)
    bullet.damage = 5
    enemy.enter_collision(bullet.get_component(Collider))
    assert enemy.stat.hp == 5
    assert events.pending == ()


def test_eleven_warns_then_fires(events, scene):
    enemy = ElevenEnemy(events, scene)
    assert enemy.get_component(Collider).size == enemy.size
    enemy.pos = Vec2(100, 100)
    target = _target(Vec2(100, 200))
    enemy.set_target(target)

    enemy.update(0.1)
    assert enemy.state is EnemyState.CAN_ATTACK

    enemy.update(0.25)
    assert enemy.warn_distance == pytest.approx(100 * 0.25 / enemy.stat.atk_delay)
    assert enemy.atk_dir == Vec2(0, 1)

    enemy.update(0.3)
    assert enemy.state is EnemyState.ATTACK
    assert enemy.warn_distance == 0.0

    enemy.update(0.01)
    assert enemy.state is EnemyState.CAN_ATTACK
    bullets = scene.layer_objects(Layer.PROJECTILE)
    assert len(bullets) == 1
    bullet = bullets[0]
    assert isinstance(bullet, EnemyBullet)
    assert bullet.pos == enemy.pos
    assert bullet.direction == enemy.atk_dir
    assert bullet.damage == enemy.stat.atk_damage


def test_eleven_resets_when_target_leaves(events, scene):
    enemy = ElevenEnemy(events, scene)
    enemy.pos = Vec2(100, 100)
    target = _target(Vec2(100, 200))
    enemy.set_target(target)
    enemy.update(0.1)
    enemy.update(0.2)
    target.pos = Vec2(100, 700)
    enemy.update(0.1)
    assert enemy.state is EnemyState.CHASE
    assert enemy.atk_timer == 0.0
    assert enemy.warn_distance == 0.0


def test_xslide_chases_when_far(events, scene):
    enemy = XSlideEnemy(events, scene)
    enemy.pos = Vec2(100, 300)
    enemy.set_target(_target(Vec2(600, 900)))
    enemy.update(0.1)
    assert enemy.state is EnemyState.CHASE


def test_orage_stands_still(events, scene):
    enemy = OrageEnemy(events, scene)
    enemy.pos = Vec2(50, 60)
    enemy.set_target(_target(Vec2(55, 60)))
    enemy.update(1.0)
    assert enemy.pos == Vec2(50, 60)
    assert enemy.state is EnemyState.CHASE
    assert enemy.get_component(Collider).size == Vec2(30, 30)