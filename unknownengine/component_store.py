"""Storage of components, keyed by entity and grouped by component type."""

from __future__ import annotations

from types import MappingProxyType
from typing import Generic, Mapping, TypeVar

from unknownengine.entity import Entity
from unknownengine.properties import Component

__all__ = ["ComponentArray", "ComponentManager"]

T = TypeVar("T", bound=Component)


class ComponentArray(Generic[T]):
    """The components of one type, at most one per entity."""

    def __init__(self) -> None:
        self._components: dict[Entity, T] = {}

    def insert(self, entity: Entity, component: T) -> None:
        """Attach a component; an entity that already has one keeps it."""
        self._components.setdefault(entity, component)

    def remove(self, entity: Entity) -> None:
        self._components.pop(entity, None)

    def get(self, entity: Entity) -> T | None:
        return self._components.get(entity)

    def has(self, entity: Entity) -> bool:
        return entity in self._components

    def all(self) -> Mapping[Entity, T]:
        """A read-only view of every entity and its component."""
        return MappingProxyType(self._components)

    def __len__(self) -> int:
        return len(self._components)


class ComponentManager:
    """Holds one component array per component type."""

    def __init__(self) -> None:
        self._arrays: dict[type[Component], ComponentArray] = {}

    def _array(self, component_type: type[T]) -> ComponentArray[T]:
        return self._arrays.setdefault(component_type, ComponentArray())

    def add_component(self, entity: Entity, component: Component) -> None:
        self._array(type(component)).insert(entity, component)

    def remove_component(self, entity: Entity, component_type: type[Component]) -> None:
        self._array(component_type).remove(entity)

    def has_component(self, entity: Entity, component_type: type[Component]) -> bool:
        return self._array(component_type).has(entity)

    def get_component(self, entity: Entity, component_type: type[T]) -> T | None:
        return self._array(component_type).get(entity)

    def get_entities(self, component_type: type[T]) -> Mapping[Entity, T]:
        return self._array(component_type).all()

    def get_all_components(self, entity: Entity) -> list[Component]:
        """Every component attached to the entity, one per type."""
        return [
            component
            for array in self._arrays.values()
            if (component := array.get(entity)) is not None
        ]