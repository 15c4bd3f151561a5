import pytest

from unknownengine.component_store import ComponentArray, ComponentManager
from unknownengine.components import Actor, DirectionalLight, Material, Transform
from unknownengine.entity import Entity


def test_array_insert_and_get():
    array = ComponentArray()
    entity = Entity(1)
    actor = Actor(name="a", entity=entity)
    array.insert(entity, actor)
    assert array.get(entity) is actor
    assert array.has(entity)


def test_array_insert_keeps_existing():
    array = ComponentArray()
    entity = Entity(1)
    first = Actor(name="first")
    array.insert(entity, first)
    array.insert(entity, Actor(name="second"))
    assert array.get(entity) is first
    assert len(array) == 1


def test_array_get_missing_is_none():
    assert ComponentArray().get(Entity(7)) is None


def test_array_remove():
    array = ComponentArray()
    entity = Entity(1)
    array.insert(entity, Actor())
    array.remove(entity)
    assert not array.has(entity)
    array.remove(entity)
    assert len(array) == 0


def test_array_all_is_read_only():
    array = ComponentArray()
    entity = Entity(1)
    actor = Actor()
    array.insert(entity, actor)
    view = array.all()
    assert dict(view) == {entity: actor}
    with pytest.raises(TypeError):
        view[Entity(2)] = Actor()


def test_manager_add_and_get_by_type():
    manager = ComponentManager()
    entity = Entity(1)
    actor = Actor(name="a", entity=entity)
    transform = Transform(actor=actor)
    manager.add_component(entity, actor)
    manager.add_component(entity, transform)
    assert manager.get_component(entity, Actor) is actor
    assert manager.get_component(entity, Transform) is transform
    assert manager.get_component(entity, Material) is None


def test_manager_has_and_remove():
    manager = ComponentManager()
    entity = Entity(1)
    manager.add_component(entity, DirectionalLight())
    assert manager.has_component(entity, DirectionalLight)
    assert not manager.has_component(entity, Actor)
    manager.remove_component(entity, DirectionalLight)
    assert not manager.has_component(entity, DirectionalLight)


def test_manager_get_entities():
    manager = ComponentManager()
    first, second = Entity(1), Entity(2)
    light_a, light_b = DirectionalLight(), DirectionalLight()
    manager.add_component(first, light_a)
    manager.add_component(second, light_b)
    manager.add_component(first, Actor())
    assert dict(manager.get_entities(DirectionalLight)) == {first: light_a, second: light_b}


def test_manager_get_entities_of_unused_type_is_empty():
    assert len(ComponentManager().get_entities(Material)) == 0


def test_manager_get_all_components():
    manager = ComponentManager()
    entity, other = Entity(1), Entity(2)
    actor = Actor(entity=entity)
    light = DirectionalLight()
    manager.add_component(entity, actor)
    manager.add_component(other, Material())
    manager.add_component(entity, light)
    assert manager.get_all_components(entity) == [actor, light]
    assert manager.get_all_components(Entity(3)) == []