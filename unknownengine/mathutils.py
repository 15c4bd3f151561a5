"""Vector and matrix helpers for 3D transforms."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

Vector = Sequence[float] | np.ndarray


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a three-component vector."""
    return np.array([x, y, z], dtype=np.float64)


def radians(degrees: float) -> float:
    return math.radians(degrees)


def normalize(vec: Vector) -> np.ndarray:
    """Return the vector scaled to unit length."""
    arr = np.asarray(vec, dtype=np.float64)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def _euler_quaternion(angles: np.ndarray) -> tuple[float, float, float, float]:
    cx, cy, cz = np.cos(angles * 0.5)
    sx, sy, sz = np.sin(angles * 0.5)
    w = cx * cy * cz + sx * sy * sz
    x = sx * cy * cz - cx * sy * sz
    y = cx * sy * cz + sx * cy * sz
    z = cx * cy * sz - sx * sy * cz
    return w, x, y, z


def _rotation_matrix(rot_degrees: np.ndarray) -> np.ndarray:
    w, x, y, z = _euler_quaternion(np.radians(rot_degrees))
    rotation = np.identity(4)
    rotation[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return rotation


def model_matrix(pos: Vector, rot: Vector, scale: Vector) -> np.ndarray:
    """Translation, then Euler rotation in degrees, then scale."""
    translation = np.identity(4)
    translation[:3, 3] = np.asarray(pos, dtype=np.float64)
    scaling = np.diag([*np.asarray(scale, dtype=np.float64), 1.0])
    rotation = _rotation_matrix(np.asarray(rot, dtype=np.float64))
    return translation @ rotation @ scaling


def view_matrix(pos: Vector, front: Vector, up: Vector = (0.0, 1.0, 0.0)) -> np.ndarray:
    """Right-handed look-at matrix from pos towards pos + front."""
    eye = np.asarray(pos, dtype=np.float64)
    f = normalize(np.asarray(front, dtype=np.float64))
    s = normalize(np.cross(f, np.asarray(up, dtype=np.float64)))
    u = np.cross(s, f)
    view = np.identity(4)
    view[0, :3] = s
    view[1, :3] = u
    view[2, :3] = -f
    view[0, 3] = -np.dot(s, eye)
    view[1, 3] = -np.dot(u, eye)
    view[2, 3] = np.dot(f, eye)
    return view


def perspective_matrix(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [-1, 1]; fov in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")
    proj = np.zeros((4, 4))
    proj[0, 0] = 1.0 / (aspect * tan_half)
    proj[1, 1] = 1.0 / tan_half
    proj[2, 2] = -(far + near) / (far - near)
    proj[2, 3] = -(2.0 * far * near) / (far - near)
    proj[3, 2] = -1.0
    return proj