# okinawa

The core of a small 3D engine: the parts that need no window and no GPU.
It gives you vector and rotation math, a parent/child scene graph, a camera
that keeps view and projection matrices, textures loaded with Pillow and
shared by reference count, mesh items, scenes, and an importer for
Wavefront OBJ files.

## Modules

- `okinawa.point` – `Point`, a mutable 3D vector with `+`, `-`, `*`, `/`,
  unary minus, in-place `+=`, `-=`, `*=`, `magnitude()`, `normalize()`
  (a zero vector for lengths under `1e-6`), `distance()`, `dot()`,
  `cross()`, `to_tuple()` and the constructors `Point.forward()`,
  `Point.right()` and `Point.up()`. `str(point)` gives `(x, y, z)`.
- `okinawa.rotation` – `Rotation(pitch, yaw, roll)`, angles in radians,
  with a 4x4 `matrix`, `rotate()`, `set_rotation()`, `transform_point()`,
  `combine()`, `copy()` and `forward_vector()`, `right_vector()`,
  `up_vector()`. Rotations compare equal when their angles are equal.
- `okinawa.geometry` – `direction_vector_to_angles(direction)` returns
  `(pitch, yaw)`; `look_at(eye, target, up=None)` returns the `Rotation`
  that turns an object at `eye` towards `target`. Zero-length vectors raise
  `ValueError`.
- `okinawa.scene_object` – `SceneObject`: local position, rotation and
  `scaling`, speed and rotational speed (`speed`, `v_rot`), and a hierarchy
  through `attach_to()`, `detach_from_parent()`, `detach_all_children()`,
  `parent` and `children()` (most recently attached first).
  `world_position()`, `world_rotation()` and `transform_matrix()` resolve
  the chain of parents. Attaching an object under itself or one of its
  descendants raises `ValueError`.
- `okinawa.camera` – `Camera(width, height)`, a `SceneObject` with `view`
  and `projection` matrices (45° field of view, near 0.1, far 100 by
  default); `set_perspective()` changes them, and the view follows every
  change of position or rotation. The helpers `perspective()` and
  `look_at_matrix()` build the matrices.
- `okinawa.texture` – `Texture` with `width`, `height`, `channels`, `path`,
  `data` and `loaded`. `Texture.from_file()` loads an image with its bottom
  row first and returns an unloaded texture (logging an error) when the
  file cannot be read; `Texture.from_raw_data()` wraps raw pixel bytes;
  `create_from_raw_data()` replaces the pixels and raises `ValueError` for
  empty data or a non-positive size.
- `okinawa.textures` – `TextureHandler`, a reference-counted store keyed by
  name or path, and `get_texture_handler()` for the shared instance.
  `get_texture()`, `create_texture_from_file()` and
  `create_texture_from_raw_data()` each take a reference;
  `remove_reference()` drops the texture once none remain.
- `okinawa.item` – `Item(name, vertices, indices)`, a `SceneObject` holding
  interleaved vertex data (3 position floats and 2 texture coordinates per
  vertex) and indices, with a bounding `radius`, `set_wireframe()`,
  `set_texture()`, `load_texture_from_file()` and `step(dt)`, which moves
  and rotates the item and its child items by their speeds scaled to the
  configured frame time.
- `okinawa.scene` – `Scene(name)`, a set of root items that `step()` only
  while the scene is active; items that already have a parent are refused.
- `okinawa.scenes` – `SceneHandler`, up to `MAX_SCENES` (32) scenes with
  `add_scene()`, `insert_scene()`, `set_scene()`, `advance()` and
  `go_back()`. A full collection raises `OverflowError`; a bad index raises
  `IndexError`.
- `okinawa.wavefront` – `import_file(filename)` builds an `Item` from an
  OBJ file; `has_texture_coordinates()`, `parse_geometry()`,
  `parse_geometry_with_uv()` and `item_name()` are the steps it uses.
  Polygons are split into triangle fans. A missing file raises `OSError`.
- `okinawa.config` – `Config` with typed `get_int`/`get_float`/`get_bool`
  and `set_int`/`set_float`/`set_bool`, and `get_config()` for the shared
  instance. A missing key logs an error and returns `0`, `0.0` or `False`.
- `okinawa.logger` – `info()`, `warning()`, `error()` and `log(level,
  message)` write coloured `HH:MM:SS [LEVEL]: message` lines to standard
  error.
- `okinawa.files` – `read_file()` returns a file's text, or `""` (logging
  an error) when it cannot be opened.
- `okinawa.strings` – `trim()`, `trim_right()`, `trim_fixed_string()`,
  `to_upper()` and `to_lower()`; the case functions touch ASCII letters
  only.

## Installation

```
pip install .
```

## Examples

Vectors and rotations:

```python
import math

from okinawa.point import Point
from okinawa.rotation import Rotation

p = Point(3.0, 0.0, 4.0)
print(p.magnitude())                               # 5.0

rot = Rotation(0.0, math.pi / 2, 0.0)
print(rot.transform_point(Point(1.0, 0.0, 0.0)))   # about (0, 0, 1)
print(Rotation().forward_vector().to_tuple())      # about (0, 0, -1)
```

Turning a direction into angles:

```python
from okinawa.geometry import direction_vector_to_angles
from okinawa.point import Point

pitch, yaw = direction_vector_to_angles(Point(1.0, 0.0, 0.0))
# pitch is 0, yaw is pi / 2
```

Importing a mesh and putting it in a scene:

```python
from okinawa.scene import Scene
from okinawa.scenes import SceneHandler
from okinawa.wavefront import import_file

item = import_file("models/cube.obj")

scene = Scene("level-1")
scene.add_item(item)

handler = SceneHandler()
handler.add_scene(scene, "level-1")
handler.set_scene(0)       # activates the scene
scene.step(16.67)          # milliseconds since the last step
```

Settings live in one shared configuration:

```python
from okinawa.config import get_config

config = get_config()
config.get_int("window.width")          # 800
config.set_bool("graphics.wireframe", True)
```

The defaults are `window.width` 800, `window.height` 600, `fps` 60,
`opengl.infolog.size` 512, `graphics.time-per-frame` 1000/60,
`graphics.wireframe` False and `graphics.textures` True.

## What it does not do

The package has no window, no rendering and no input handling. Items and
scenes keep their geometry, transforms and textures but do not draw them;
there are no shaders, no GPU buffers and no main loop. The camera's
matrices and an item's `transform_matrix()` are there for a renderer to
use. There is no command-line program.

## Tests

```
pip install ".[test]"
pytest
```