# gamecore

A compact core for 2D games with no rendering or windowing of its own.
It has no dependencies outside the standard library.

## What is in it

| Module | Contents |
| --- | --- |
| `gamecore.vec2` | `Vec2` (floats) and `IVec2` (integers): immutable vectors with `+`, `-`, `*`, `/`, negation, `Vec2.normalize()` and `IVec2.to_vec2()` |
| `gamecore.rect` | `Rect` and `IRect`, given by two corners in any order, with `left()`, `right()`, `bottom()`, `top()` and `size()` |
| `gamecore.matrix` | `TransformationMatrix` (3×3, multiplied with `*` by another matrix or a vector) and `translation_matrix`, `scale_matrix`, `rotation_matrix` |
| `gamecore.logger` | `Severity` and `Logger`, which writes `[seconds]\tSeverity\tmessage` lines at or above a minimum level to `Trace.log`, stdout or a given stream |
| `gamecore.animation` | `PlayFrame`, `Loop`, `End`, `parse_commands()` and `Animation`, which plays a command script and can load it from a `.anm` file |
| `gamecore.component` | `Component`, `ComponentManager` (lookup by type), and the `Timer`, `Score` and `Gravity` components |
| `gamecore.input` | `Key` and `Input`, which tracks held keys and reports just-pressed and just-released keys |
| `gamecore.camera` | `Camera`, which follows a player inside a zone, clamps to a limit and gives a view matrix |
| `gamecore.collision` | `CollisionShape`, `Collision`, `RectCollision` and `CircleCollision` |
| `gamecore.gameobject` | `GameObjectType`, `State` and the abstract `GameObject` with a cached transform, a state machine and components |
| `gamecore.gameobject_manager` | `GameObjectManager`, which updates objects, drops destroyed ones and runs collision tests |
| `gamecore.gamestate` | `StateId`, `FontId`, `Status`, the abstract `GameState` and `GameStateManager` |
| `gamecore.show_collision` | `ShowCollision`, a flag toggled each time Tab is released |
| `gamecore.engine` | `Engine`, which paces frames at 30 per second and drives input and game states |

## Installation

```
pip install .
```

With test dependencies:

```
pip install ".[test]"
```

## Examples

Transforms:

```python
from gamecore.vec2 import Vec2
from gamecore.matrix import translation_matrix, rotation_matrix

m = translation_matrix(Vec2(10, 0)) * rotation_matrix(0.0)
print(m * Vec2(1, 2))  # Vec2(x=11.0, y=2.0)
```

Animation scripts are whitespace-separated commands:

```
PlayFrame 0 0.1
PlayFrame 1 0.1
Loop 0
```

```python
import sys

from gamecore.animation import Animation
from gamecore.logger import Logger, Severity

logger = Logger(Severity.EVENT, stream=sys.stdout)
anim = Animation.from_file("walk.anm", logger)
anim.update(0.15)
print(anim.current_frame())  # 1
```

Unknown commands in a script are logged as errors and skipped. A file whose
name does not end in `.anm` raises `ValueError`; one that cannot be read
raises `OSError`.

Game objects are subclasses of `GameObject` that give an `object_type` and a
`type_name()`. Collision rules are declared with the class attributes
`collides_with` (a set of `GameObjectType`) and `collision_responses` (a
mapping from `GameObjectType` to a `handler(self, other)` function).

The engine takes the keys held in each frame from the caller:

```python
from gamecore.engine import Engine
from gamecore.input import Key

engine = Engine(debug=True)
engine.start()
while not engine.has_game_ended():
    engine.update({Key.SPACE})
```

`Engine.request_close()` ends the game as closing a window would.

## What it does not do

The package draws nothing and opens no window. There are no sprites,
textures, fonts, particles or background layers, and it reads no keyboard
itself: the caller passes the held keys to `Engine.update` or `Input.update`.
It has no command-line program.

## Running the tests

```
pytest
```