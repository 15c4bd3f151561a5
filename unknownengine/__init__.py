"""Core of a small game engine: entities, components, systems, transforms, lighting, a camera and serialization."""

__version__ = "0.1.0"