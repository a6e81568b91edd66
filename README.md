# slotarena

`slotarena` holds the game logic of a top-down arena shooter. The game takes place on a square play field that is centred on a 720 × 1220 screen. The package has no drawing code. Each frame, you pass in the frame time, the keys that are down and the mouse position. The package then moves the player, the bullets and the enemies, and resolves collisions.

## Modules

- `slotarena.vec2` holds the immutable `Vec2` (float) and `Vec2Int` (integer, ordered by x and then y) types. It also has the `Rect` tuple and the helpers `rad2deg`, `deg2rad` and `rect_make`, which returns a rectangle of a given size centred on a point.
- `slotarena.enums` holds `Layer`, `PenType`, `BrushType`, `EventType`, `EnemyType`, `SCREEN_WIDTH` and `SCREEN_HEIGHT`.
- `slotarena.astar` holds `AStarNode` and `AStarGrid`. `AStarGrid(size)` is a square grid of nodes laid over the play field. `node_from_position` gives the nearest cell to a point. `find_path(start_pos, target_pos)` returns the waypoints from the target cell back toward the start. The start cell is not included, and the list is empty when no path exists.
- `slotarena.component` holds `Component`, the base class for per-object behaviour. It has an abstract `late_update(dt)`.
- `slotarena.gameobject` holds `Stat` and `GameObject`. A `GameObject` has a position, a size, a name, stats, components (`add_component` and `get_component`) and collision callbacks.
- `slotarena.collider` holds `Collider`, a box that follows its owner at an offset. `bounds()` gives its integer rectangle.
- `slotarena.collision` holds `is_collision` and `CollisionManager`. `check_layer` switches checking between two layers on or off. `update(scene)` calls `enter_collision`, `stay_collision` and `exit_collision` on the colliders involved.
- `slotarena.events` holds `Event` and `EventManager`. `delete_object` queues an object for deletion. The next `update()` marks the object dead. The `update()` after that returns it as released.
- `slotarena.scene` holds the abstract `Scene`. A scene keeps objects by layer and has its own `CollisionManager` as `collisions`. It provides `update`, `late_update`, `purge_dead`, `release`, `add_object` and `layer_objects`.
- `slotarena.animation` holds `AnimFrame`, `Animation` and the `Animator` component. They handle frame timing and repeat counts for sprite animations. The `texture` given to an animation is stored and never used.
- `slotarena.pathfinder` holds `AStarPathFinder`. This component moves its owner at 100 units per second along a path from an `AStarGrid`.
- `slotarena.timing` holds `FrameClock`. `tick()` returns the delta time from any clock function and updates `fps` once per second.
- `slotarena.keyboard` holds `KeyType`, `KeyState` and `InputManager`. Each frame, `update(pressed, focused, mouse_pos)` moves every key through the states `NONE`, `DOWN`, `PRESS` and `UP`.
- `slotarena.inventory` holds `Button` and `InventoryManager`. The inventory is an overlay with four buttons. They change the series count (1 to 50), which sets the damage per shot, and the parallel count (1 to 10), which sets the bullets per shot.
- `slotarena.projectile` holds `Projectile`, `PlayerBullet` and `EnemyBullet`. Each moves at 500 units per second and carries a collider.
- `slotarena.player` holds `Player`. It moves with W, A, S and D, stays inside the play field, toggles the inventory with TAB, and fires a fan of bullets toward the mouse while the left button is held.
- `slotarena.enemies` holds `EnemyState`, `Enemy`, `MeleeEnemy`, `DollEnemy`, `TradianEnemy`, `ElevenEnemy` (fires aimed shots after a warning), `XSlideEnemy` (dashes out and back) and `OrageEnemy` (stands still). An enemy chases its target only when an `AStarPathFinder` is attached to it.

## Path search

```python
from slotarena.astar import AStarGrid
from slotarena.vec2 import Vec2

grid = AStarGrid(20)
path = grid.find_path(Vec2(10.0, 300.0), Vec2(700.0, 900.0))
next_waypoint = path[-1]  # the list runs from the target back toward the start
```

## A frame loop

```python
from slotarena.enums import Layer
from slotarena.events import EventManager
from slotarena.inventory import InventoryManager
from slotarena.keyboard import InputManager, KeyType
from slotarena.player import Player
from slotarena.scene import Scene
from slotarena.timing import FrameClock
from slotarena.vec2 import Vec2


class Arena(Scene):
    def __init__(self):
        super().__init__()
        self.events = EventManager()
        self.input = InputManager()
        self.inventory = InventoryManager()

    def init(self):
        player = Player(self, self.events, self.inventory, self.input)
        player.pos = Vec2(360.0, 500.0)
        player.size = Vec2(25.0, 25.0)
        self.add_object(player, Layer.PLAYER)
        self.collisions.check_layer(Layer.PROJECTILE, Layer.PLAYER)
        self.collisions.check_layer(Layer.PROJECTILE, Layer.ENEMY)


arena = Arena()
arena.init()
clock = FrameClock()

for _ in range(60):
    dt = clock.tick()
    arena.input.update({KeyType.D, KeyType.LBUTTON}, mouse_pos=Vec2(360.0, 100.0))
    arena.update(dt)
    arena.late_update(dt)
    arena.collisions.update(arena)
    arena.inventory.update(arena.input)
    arena.purge_dead()
    arena.events.update()
```

Movement and firing respond to held keys (`KeyState.PRESS`). A key pressed in a given frame starts to act in the frame after.

## What it does not do

The package does not open a window, draw anything, load textures or play sounds. It has no title screen, no enemy waves or spawning, no boss, and no command to run. A program that uses it supplies the main loop, the input and the rendering.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```