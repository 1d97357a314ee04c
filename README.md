# geowars

The game logic of a Geometry Wars style arcade shooter. It is built on a small
entity-component system and covers movement, collision, shooting, enemy
behaviours and input handling.

Drawing is kept abstract. A `Shape` holds vertices, a colour, a line width, a
draw mode and a 2D transformation. Render components queue themselves on a
`RenderQueue`, and a front end can then draw whatever was queued.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `geowars.randomness`: a shared generator with a fixed default seed. It provides `seed(value)`, `random_float(min_value, max_value)` and `random_int(min_value, max_value)`. The integer range includes both ends, and an empty range raises `ValueError`.
- `geowars.paths`:
  - `find_folder(folder_name, start=None)` searches a directory and its ancestors for a folder. It returns `(path, found)`.
  - `load_file_to_string(path)` returns the text of a file, or `""` when the file cannot be read.
- `geowars.actions`: `ActionController` adds up weighted input.
  - `value` is that sum clamped to [-1, 1].
  - `clicked_position` is the last mouse position.
- `geowars.geometry`:
  - `Vec2` is an immutable vector with `length` and `distance`.
  - `Mat3` is an affine matrix with `identity`, `translate`, `rotate`, `scale` and `apply`.
  - `DrawMode` lists the draw modes.
  - `Shape` has `transformed_points()`, which gives the vertices after the current transformation.
- `geowars.entity`:
  - `Component` is the base class for components.
  - An `Entity` holds at most one component of each type.
  - `EntityManager` creates entities, updates them and, on `clean`, drops the inactive ones.
- `geowars.movement`: `MovementComponent` keeps a position and a constant velocity. The velocity reverses when the entity leaves the 1280×720 playfield.
- `geowars.health`: `HealthComponent` keeps current and maximum health.
- `geowars.collision`:
  - `CollideMask` lists the kinds of collidable object.
  - `can_collide(first, second)` checks the collision table. The table is not symmetric, so the order of the arguments matters.
  - `CollideComponent` and `CollisionManager` find and resolve each frame's collisions.
  - On a collision, a player returns to (400, 400). Anything else loses all its components.
- `geowars.rendering`: `RenderQueue` (`queue_to_render`, `drain`) and `RenderComponent`.
- `geowars.weapons`: `Weapon` and the guns `SingleShotGun`, `DoubleShotGun`, `TripleShotGun` and `EnemyGun`.
- `geowars.shooting`: `ShootComponent` handles cooldowns. It holds three weapon slots and cycles through them with `next_weapon`.
- `geowars.behaviours`: the enemy AI.
  - The behaviours are `Chaser`, `RandomWalker`, `ChaserWhenNear` and `Shooting`.
  - `EnemyBehaviourComponent` moves an enemy according to its behaviour.
- `geowars.input`:
  - `InputManager` routes key and mouse events to the `ActionController`s bound to them.
  - `InputComponent` turns those controllers into movement and shots.
- `geowars.spawner`: `GameObjectSpawner` assembles players, bullets, enemies and shooting enemies.
  - You can pass an optional `play_sound` callable.
  - It is called with `"laser"` for every bullet spawned.
- `geowars.game`: `Game` and `GameState` tie everything together.

## Example

```python
from geowars.game import KEY_SPACE, Game, GameState

game = Game()
game.update(0.016)                      # still on the welcome screen
game.input_manager.on_key_down(KEY_SPACE, False)
game.update(0.016)
assert game.state == GameState.PLAYING
game.update(0.016)
print(len(game.frame))                  # render components queued this frame
```

A front end forwards keyboard and mouse events to `game.input_manager`, using `on_key_down`, `on_key_up`, `on_mouse_down`, `on_mouse_up` and `on_mouse_move`. It then calls `Game.update` once per frame with the elapsed time in seconds.

The player's controls are bound when the game is created:

- A and D move horizontally.
- W and S move vertically.
- The left mouse button fires.
- R switches weapon while firing.

The key codes are the constants in `geowars.spawner`.

While the state is `GameState.PLAYING`, each update:

1. updates the entities,
2. applies input,
3. resolves collisions,
4. spawns a random enemy every half second.

## What it does not do

This package is game logic only:

- It opens no window.
- It draws nothing and has no shaders, background or blur effects.
- It plays no sound itself.
- It offers no command to start a game.

A front end has to supply the event loop and draw the shapes in `Game.frame`. It may also pass in a `play_sound` callable.