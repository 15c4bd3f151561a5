"""Systems that act on components, and the registry that runs them."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Any, Iterable, TypeVar

from unknownengine.component_store import ComponentManager
from unknownengine.components import DirectionalLight, Transform
from unknownengine.logger import get_logger

__all__ = ["System", "SystemsManager", "LightingSystem", "pack_lights"]

S = TypeVar("S", bound="System")

# Light arrays start with a uint32 count padded to 16 bytes (std430 alignment).
_HEADER_SIZE = 16


class System(ABC):
    """Logic that runs over the components of a scene."""

    @abstractmethod
    def update(self, components: ComponentManager, dt: float) -> None:
        """Advance the system by dt seconds."""


class SystemsManager:
    """Keeps the registered systems in registration order."""

    def __init__(self) -> None:
        self._systems: list[System] = []

    def register_system(self, system_type: type[S], *args: Any, **kwargs: Any) -> S:
        """Create a system of the given type, register it and return it."""
        if not (isinstance(system_type, type) and issubclass(system_type, System)):
            raise TypeError(f"{system_type!r} is not a system type")
        system = system_type(*args, **kwargs)
        self._systems.append(system)
        return system

    def _find(self, system_type: type[S]) -> S | None:
        return next((s for s in self._systems if isinstance(s, system_type)), None)

    def get_system(self, system_type: type[S]) -> S:
        """Return the first registered system of the given type."""
        system = self._find(system_type)
        if system is None:
            raise LookupError(f'System "{system_type.__name__}" couldn\'t be found.')
        return system

    def update_all(self, components: ComponentManager, dt: float) -> None:
        for system in self._systems:
            system.update(components, dt)

    def update_system(self, system_type: type[System], components: ComponentManager, dt: float) -> None:
        """Update the first system of the given type; warn if none is registered."""
        system = self._find(system_type)
        if system is None:
            get_logger().warn(
                "System \"{}\" couldn't be updated. Are you sure it's registered?",
                system_type.__name__,
            )
            return
        system.update(components, dt)


def pack_lights(lights: Iterable[DirectionalLight]) -> bytes:
    """A uint32 count, zero padding to 16 bytes, then each light's packed data."""
    packed = [light.pack() for light in lights]
    header = struct.pack("<I", len(packed)).ljust(_HEADER_SIZE, b"\0")
    return header + b"".join(packed)


class LightingSystem(System):
    """Copies each light's transform rotation into it and packs all lights."""

    def __init__(self) -> None:
        self.buffer: bytes = b""

    def update(self, components: ComponentManager, dt: float) -> None:
        lights = components.get_entities(DirectionalLight)
        for entity, light in lights.items():
            transform = components.get_component(entity, Transform)
            if transform is None:
                raise LookupError(f"entity {entity.id} has a light but no transform")
            light.rotation = transform.world_rotation()
        self.buffer = pack_lights(lights.values())