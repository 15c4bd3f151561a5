"""The built-in components: actor, transform, light, material and model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, ClassVar

import numpy as np

from unknownengine.color import Color
from unknownengine.entity import Entity
from unknownengine.mathutils import Vector
from unknownengine.mathutils import model_matrix as _model_matrix
from unknownengine.properties import Component, Property

__all__ = [
    "Actor",
    "Transform",
    "DirectionalLight",
    "Material",
    "ModelComponent",
]


def _vec(values: Vector | None, default: float = 0.0) -> np.ndarray:
    if values is None:
        return np.full(3, default, dtype=np.float64)
    return np.array(values, dtype=np.float64)


def _f32(*parts: Any) -> bytes:
    return np.concatenate([np.atleast_1d(np.asarray(p, dtype=np.float64)) for p in parts]).astype("<f4").tobytes()


@dataclass(eq=False)
class Actor(Component):
    """Identity of an entity: its name, entity id and a unique id."""

    PROPERTIES: ClassVar[tuple[Property, ...]] = (
        Property("GetName", False, "name", True),
    )

    name: str = ""
    entity: Entity = Entity()
    uuid: uuid.UUID = field(default_factory=uuid.uuid4)


class Transform(Component):
    """Position, rotation (degrees) and scale of an entity, relative to its parent."""

    PROPERTIES: ClassVar[tuple[Property, ...]] = (
        Property("GetPosition", False, "position", True),
        Property("GetRotation", False, "rotation", True),
        Property("GetScale", False, "scale", True),
        Property("GetParent", True, "parent", True),
        Property("GetActor", True, "actor", True),
    )

    def __init__(
        self,
        position: Vector | None = None,
        rotation: Vector | None = None,
        scale: Vector | None = None,
        actor: Actor | None = None,
        parent: Transform | None = None,
    ) -> None:
        self.position = _vec(position)
        self.rotation = _vec(rotation)
        # Scale adds up along the hierarchy, so a child starts at zero.
        self.scale = _vec(scale, 0.0 if parent is not None else 1.0)
        self.actor = actor
        self.parent = parent
        self._children: list[Transform] = []
        if parent is not None:
            parent.add_child(self)

    @property
    def children(self) -> tuple[Transform, ...]:
        return tuple(self._children)

    def world_position(self) -> np.ndarray:
        if self.parent is not None:
            return self.parent.world_position() + self.position
        return self.position.copy()

    def world_rotation(self) -> np.ndarray:
        if self.parent is not None:
            return self.parent.world_rotation() + self.rotation
        return self.rotation.copy()

    def world_scale(self) -> np.ndarray:
        if self.parent is not None:
            return self.parent.world_scale() + self.scale
        return self.scale.copy()

    def set_parent(self, parent: Transform | None) -> None:
        """Reparent this transform, keeping its world position, rotation and scale."""
        if self.parent is not None:
            self.parent.remove_child(self)

        if parent is not None:
            self.scale = self.world_scale() - parent.world_scale()
            self.position = self.world_position() - parent.world_position()
            self.rotation = self.world_rotation() - parent.world_rotation()
            parent.add_child(self)
        else:
            self.position = self.world_position()
            self.rotation = self.world_rotation()
            self.scale = self.world_scale()

        self.parent = parent

    def add_child(self, child: Transform) -> None:
        self._children.append(child)

    def remove_child(self, child: Transform) -> None:
        self._children = [c for c in self._children if c is not child]

    def is_child(self) -> bool:
        return self.parent is not None

    def has_children(self) -> bool:
        return bool(self._children)

    def model_matrix(self) -> np.ndarray:
        return _model_matrix(
            self.world_position(), self.world_rotation(), self.world_scale()
        )


@dataclass(eq=False)
class DirectionalLight(Component):
    """A light shining in one direction; its rotation follows its transform."""

    PROPERTIES: ClassVar[tuple[Property, ...]] = (
        Property("rotation", True),
        Property("ambient"),
        Property("diffuse"),
        Property("specular"),
    )

    ambient: Color = field(default_factory=Color.white)
    diffuse: Color = field(default_factory=Color.white)
    specular: Color = field(default_factory=Color.white)
    rotation: np.ndarray = field(init=False, default_factory=lambda: np.zeros(3))

    def pack(self) -> bytes:
        """Four 16-byte aligned vec4 values: rotation, ambient, diffuse, specular."""
        return _f32(
            self.rotation,
            0.0,
            self.ambient.to_padded_floats(),
            self.diffuse.to_padded_floats(),
            self.specular.to_padded_floats(),
        )


@dataclass(eq=False)
class Material(Component):
    """Surface colour and specular settings, with the shader used to draw."""

    PROPERTIES: ClassVar[tuple[Property, ...]] = (
        Property("color"),
        Property("specularReflectance", False, "specular_reflectance"),
        Property("specularDefinition", False, "specular_definition"),
        Property("GetName", False, "name", True),
        Property("GetShader", False, "shader", True),
    )

    name: str = ""
    shader: Any = None
    color: Color = field(init=False, default_factory=lambda: Color(179, 175, 174))
    specular_reflectance: Color = field(init=False, default_factory=Color.white)
    specular_definition: float = field(init=False, default=32.0)

    def pack(self) -> bytes:
        """Padded colour, specular reflectance and shininess: 32 bytes."""
        return _f32(
            self.color.to_padded_floats(),
            self.specular_reflectance.to_floats(),
            self.specular_definition,
        )


@dataclass(eq=False)
class ModelComponent(Component):
    """Holds the model an entity renders."""

    PROPERTIES: ClassVar[tuple[Property, ...]] = (
        Property("GetModel", False, "model", True),
    )

    model: Any = None