"""Conversion of components to and from JSON-compatible dictionaries."""

from __future__ import annotations

import uuid
from typing import Any, TypeVar

import numpy as np

from unknownengine.components import Actor, Transform
from unknownengine.properties import Component, Property

__all__ = ["serialize", "serialize_value", "deserialize"]

C = TypeVar("C", bound=Component)


def serialize(component: Component) -> dict[str, Any]:
    """Describe a component as its name and the serialized value of each property."""
    return {
        "componentName": component.component_name(),
        "properties": [
            serialize_value(prop.get(component))
            for prop in component.component_properties()
        ],
    }


def serialize_value(value: Any) -> dict[str, Any]:
    """Tag a single property value with its type.

    ``None`` is written as an empty transform reference, the only kind of
    property that is allowed to be unset.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("unsupported type for serialization: bool")
    if isinstance(value, (int, np.integer)):
        return {"type": "int", "value": int(value)}
    if isinstance(value, (float, np.floating)):
        return {"type": "float", "value": float(value)}
    if isinstance(value, np.ndarray) and value.shape == (3,):
        return {"type": "vec3", "value": [float(v) for v in value]}
    if isinstance(value, Actor):
        return {"type": "actor_shared_ptr", "value": str(value.uuid)}
    if isinstance(value, Transform):
        if value.actor is None:
            raise ValueError("a transform without an actor cannot be referenced")
        return {"type": "transform_ptr", "value": str(value.actor.uuid)}
    if value is None:
        return {"type": "transform_ptr", "value": ""}
    raise TypeError(f"unsupported type for serialization: {type(value).__name__}")


def deserialize(component_type: type[C], data: dict[str, Any]) -> C:
    """Build a default component and fill its properties, in order, from data."""
    if not (isinstance(component_type, type) and issubclass(component_type, Component)):
        raise TypeError(f"{component_type!r} is not a component type")

    component = component_type()
    properties = component_type.component_properties()
    entries = data["properties"]
    if len(entries) > len(properties):
        raise ValueError(
            f"{component_type.component_name()} has {len(properties)} properties, "
            f"got {len(entries)} values"
        )

    for entry, prop in zip(entries, properties):
        _deserialize_property(entry, prop, component)
    return component


def _deserialize_property(entry: dict[str, Any], prop: Property, component: Component) -> None:
    kind = entry["type"]
    if kind == "int":
        prop.set(component, int(entry["value"]))
    elif kind == "float":
        prop.set(component, float(entry["value"]))
    elif kind == "vec3":
        x, y, z = entry["value"]
        prop.set(component, np.array([x, y, z], dtype=np.float64))
    elif kind == "actor_shared_ptr":
        # A placeholder actor that only carries the identity to resolve later.
        prop.set(component, Actor(uuid=uuid.UUID(entry["value"])))
    elif kind == "transform_ptr":
        # Transform references cannot be resolved yet; they are left unset.
        prop.set(component, None)