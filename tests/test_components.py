import uuid

import numpy as np

from unknownengine.color import Color
from unknownengine.components import (
    Actor,
    DirectionalLight,
    Material,
    ModelComponent,
    Transform,
)
from unknownengine.entity import Entity
from unknownengine.mathutils import model_matrix


def test_actor_fields_and_uuid():
    a = Actor("Cube", Entity(5))
    b = Actor("Cube", Entity(5))
    assert a.name == "Cube"
    assert a.entity == Entity(5)
    assert a.uuid != b.uuid


def test_actor_keeps_given_uuid():
    u = uuid.uuid4()
    assert Actor(uuid=u).uuid == u


def test_actor_properties():
    props = Actor.component_properties()
    assert [p.name for p in props] == ["GetName"]
    actor = Actor("Empty Actor")
    assert props[0].get(actor) == "Empty Actor"
    assert props[0].beautified_name() == "Name"


def test_component_names():
    assert Actor.component_name() == "Actor"
    assert Transform.component_name() == "Transform"
    assert DirectionalLight.component_name() == "DirectionalLight"
    assert Material.component_name() == "Material"
    assert ModelComponent.component_name() == "ModelComponent"


def test_child_world_values_add_up():
    parent = Transform((1, 2, 3), (10, 20, 30), (1, 1, 1))
    child = Transform((4, 5, 6), (1, 1, 1), (0, 0, 0), parent=parent)
    assert np.allclose(child.world_position(), parent.position + child.position)
    assert np.allclose(child.world_rotation(), parent.rotation + child.rotation)
    assert np.allclose(child.world_scale(), parent.scale + child.scale)


def test_constructor_registers_child():
    parent = Transform()
    child = Transform(parent=parent)
    assert parent.children == (child,)
    assert child.is_child()
    assert parent.has_children()
    assert not parent.is_child()


def test_set_parent_keeps_world_values():
    a = Transform((1, 2, 3), (5, 0, 0), (2, 2, 2))
    b = Transform((-4, 0, 7), (0, 9, 0), (1, 3, 1))
    pos, rot, scale = b.world_position(), b.world_rotation(), b.world_scale()
    b.set_parent(a)
    assert b.parent is a
    assert b in a.children
    assert np.allclose(b.world_position(), pos)
    assert np.allclose(b.world_rotation(), rot)
    assert np.allclose(b.world_scale(), scale)


def test_set_parent_none_detaches():
    root = Transform((1, 1, 1), (0, 0, 0), (1, 1, 1))
    child = Transform((2, 0, 0), None, None, parent=root)
    world = child.world_position()
    child.set_parent(None)
    assert not child.is_child()
    assert not root.has_children()
    assert np.allclose(child.position, world)


def test_remove_child():
    parent = Transform()
    c1 = Transform(parent=parent)
    c2 = Transform(parent=parent)
    parent.remove_child(c1)
    assert parent.children == (c2,)


def test_model_matrix_uses_world_values():
    parent = Transform((1, 0, 0), (0, 45, 0), (1, 1, 1))
    child = Transform((0, 2, 0), (0, 0, 10), (0, 0, 0), parent=parent)
    expected = model_matrix(
        child.world_position(), child.world_rotation(), child.world_scale()
    )
    assert np.allclose(child.model_matrix(), expected)


def test_transform_properties():
    props = Transform.component_properties()
    assert [p.name for p in props] == [
        "GetPosition",
        "GetRotation",
        "GetScale",
        "GetParent",
        "GetActor",
    ]
    assert [p.hidden for p in props] == [False, False, False, True, True]


def test_transform_property_returns_live_vector():
    t = Transform((1, 2, 3))
    props = Transform.component_properties()
    props[0].get(t)[0] = 9.0
    assert t.position[0] == 9.0
    assert props[4].get(t) is t.actor


def test_directional_light_defaults_and_pack():
    light = DirectionalLight()
    assert light.ambient == Color.white()
    light.rotation = np.array([10.0, 20.0, 30.0])
    light.diffuse = Color(255, 0, 0)
    data = np.frombuffer(light.pack(), dtype="<f4").reshape(4, 4)
    assert np.allclose(data[0, :3], light.rotation)
    assert data[0, 3] == 0.0
    assert np.allclose(data[1], light.ambient.to_padded_floats())
    assert np.allclose(data[2], light.diffuse.to_padded_floats())
    assert np.allclose(data[3], light.specular.to_padded_floats())
    assert len(light.pack()) == 64


def test_directional_light_properties():
    props = DirectionalLight.component_properties()
    assert [p.name for p in props] == ["rotation", "ambient", "diffuse", "specular"]
    assert props[0].hidden
    assert not any(p.hidden for p in props[1:])


def test_material_defaults():
    m = Material("default", shader="lit")
    assert m.color == Color(179, 175, 174)
    assert m.specular_reflectance == Color.white()
    assert m.specular_definition == 32.0
    assert m.shader == "lit"


def test_material_pack():
    m = Material()
    packed = m.pack()
    floats = np.frombuffer(packed, dtype="<f4")
    assert len(packed) == 32
    assert np.allclose(floats[:4], m.color.to_padded_floats())
    assert np.allclose(floats[4:7], m.specular_reflectance.to_floats())
    assert floats[7] == m.specular_definition


def test_material_properties():
    props = Material.component_properties()
    assert [p.name for p in props] == [
        "color",
        "specularReflectance",
        "specularDefinition",
        "GetName",
        "GetShader",
    ]
    m = Material("default")
    props[2].set(m, 8.0)
    assert m.specular_definition == 8.0
    assert props[3].get(m) == "default"


def test_model_component():
    model = object()
    mc = ModelComponent(model)
    prop = ModelComponent.component_properties()[0]
    assert prop.get(mc) is model
    assert prop.beautified_name() == "Model"