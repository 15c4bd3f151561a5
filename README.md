# unknownengine

The core of a small game engine. It has no windowing or GPU dependencies, only numpy.

What it holds:

- `unknownengine.entity`: `Entity`, a plain id. `Entity.create()` hands out fresh ids from 1, and id 0 is the invalid entity.
- `unknownengine.properties`: `Property` and the `Component` base class. Components list their reflected properties in `PROPERTIES`.
- `unknownengine.components`: the built-in components `Actor`, `Transform`, `DirectionalLight`, `Material` and `ModelComponent`.
- `unknownengine.component_store`: `ComponentArray` and `ComponentManager`. They store at most one component of each type for each entity.
- `unknownengine.systems`: the `System` base class, `SystemsManager`, `LightingSystem` and `pack_lights`.
- `unknownengine.serializer`: `serialize`, `serialize_value` and `deserialize`, which turn components into JSON-friendly dictionaries and back.
- `unknownengine.mathutils`: `vec3`, `model_matrix`, `view_matrix`, `perspective_matrix`, `normalize` and `radians`.
- `unknownengine.color`: `Color`, an 8-bit RGB colour.
- `unknownengine.camera`: `Camera`, a perspective camera.
- `unknownengine.logger`: `Logger` and `get_logger`. A logger prints messages and keeps a history of them.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Entities, components and transforms

```python
from unknownengine.component_store import ComponentManager
from unknownengine.components import Actor, Transform
from unknownengine.entity import Entity

components = ComponentManager()

root = Entity.create()
root_actor = Actor(name="Root", entity=root)
root_transform = Transform(position=(1, 2, 3), actor=root_actor)
components.add_component(root, root_actor)
components.add_component(root, root_transform)

child = Entity.create()
child_actor = Actor(name="Child", entity=child)
child_transform = Transform(position=(1, 0, 0), actor=child_actor, parent=root_transform)
components.add_component(child, child_actor)
components.add_component(child, child_transform)

print(child_transform.world_position())   # [2. 2. 3.]
print(root_transform.has_children())      # True
```

A transform's position, rotation (in degrees) and scale are relative to its parent. The world values add up along the hierarchy, and this includes scale. A transform without a parent therefore starts at scale 1, and one with a parent starts at scale 0. `set_parent()` moves a transform to a new parent, or to the root with `None`, and keeps its world values.

`ComponentManager.get_component()` returns `None` when the entity has no component of that type. Adding a second component of a type an entity already has leaves the first one in place.

## Lighting

```python
from unknownengine.components import DirectionalLight
from unknownengine.systems import LightingSystem, SystemsManager

light = Entity.create()
components.add_component(light, Actor(name="Sun", entity=light))
components.add_component(light, Transform(rotation=(0, 45, 0)))
components.add_component(light, DirectionalLight())

systems = SystemsManager()
lighting = systems.register_system(LightingSystem)
systems.update_all(components, 0.0)

print(len(lighting.buffer))   # 16-byte header + 64 bytes per light
```

`LightingSystem` copies each light's world rotation from its `Transform` into the light. It raises `LookupError` if a light's entity has no transform. It then packs every light into `buffer`: a uint32 count padded to 16 bytes, followed by four float32 vec4 values per light. `SystemsManager.get_system()` raises `LookupError` for a type that is not registered. `update_system()` only logs a warning in that case.

## Serialization

```python
from unknownengine.serializer import deserialize, serialize

data = serialize(child_transform)
# {"componentName": "Transform", "properties": [{"type": "vec3", "value": [1.0, 0.0, 0.0]}, ...]}

restored = deserialize(Transform, data)
```

Supported value types are int, float, three-component vectors, actors and transform references. Other types raise `TypeError`. A deserialized actor is a placeholder that only carries the original UUID. Transform references are restored as `None`.

## Camera and math

```python
from unknownengine.camera import Camera
from unknownengine.mathutils import model_matrix

camera = Camera((-3, 0, 0), 16 / 9, 70.0, 0.01, 1000.0)
view = camera.view_matrix()
projection = camera.projection_matrix()
packed = camera.pack_data(model_matrix((0, 0, 0), (0, 0, 0), (1, 1, 1)))
```

`pack_data()` returns the projection, view and model matrices as column-major float32, followed by the camera position.

## Colours

```python
from unknownengine.color import Color

c = Color(255, 128, 0)
c.to_floats()   # array([1.0, 0.50196..., 0.0])
c.to_number()   # red in the low byte, then green, then blue
```

Channels must lie between 0 and 255. Any other value raises `ValueError`.

## Logging

```python
from unknownengine.logger import get_logger

log = get_logger()
log.warn("Something odd: {}", 42)
for line in log.lines:
    print(line.level, line.message)
```

Messages use `str.format` placeholders. Each one is prefixed with the time and level. Warnings print in yellow and errors in red. `todo()` prints a blue reminder and does not record it in `lines`.

## What this package does not do

- It opens no window and draws nothing. Shaders and models are opaque values held by `Material` and `ModelComponent`.
- It has no scenes, no project folders and no saving or loading of scenes to disk. You keep your own `ComponentManager` and `SystemsManager`.
- It has no command-line program.

## Running the tests

```
pytest
```