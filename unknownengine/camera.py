"""Perspective camera."""

from __future__ import annotations

import math

import numpy as np

from unknownengine.mathutils import (
    Vector,
    normalize,
    perspective_matrix,
    radians,
    view_matrix,
)


def _column_major(matrix: np.ndarray) -> bytes:
    return np.asarray(matrix, dtype="<f4").flatten(order="F").tobytes()


class Camera:
    """A camera with a position, yaw and pitch (degrees) and a perspective lens."""

    def __init__(
        self,
        position: Vector = (0.0, 0.0, 0.0),
        aspect_ratio: float = 0.0,
        fov: float = 0.0,
        near: float = 0.0,
        far: float = 0.0,
    ) -> None:
        self.position = np.asarray(position, dtype=np.float64)
        self.aspect_ratio = float(aspect_ratio)
        self.fov = radians(fov)
        self.near = float(near)
        self.far = float(far)
        self.yaw = 0.0
        self.pitch = 0.0

    def resize(self, aspect_ratio: float) -> None:
        self.aspect_ratio = float(aspect_ratio)

    def forward_vector(self) -> np.ndarray:
        yaw = radians(self.yaw)
        pitch = radians(self.pitch)
        return np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )

    def view_matrix(self) -> np.ndarray:
        return view_matrix(self.position, normalize(self.forward_vector()))

    def projection_matrix(self) -> np.ndarray:
        return perspective_matrix(self.fov, self.aspect_ratio, self.near, self.far)

    def pack_data(self, model_matrix: np.ndarray) -> bytes:
        """Projection, view and model matrices (column-major float32) then position."""
        return b"".join(
            (
                _column_major(self.projection_matrix()),
                _column_major(self.view_matrix()),
                _column_major(model_matrix),
                np.asarray(self.position, dtype="<f4").tobytes(),
            )
        )