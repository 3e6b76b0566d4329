"""Camera with rotation, projection and view matrices."""

from __future__ import annotations

import math

import numpy as np

_NEAR = 0.05
_FAR = 1500.0


def _normalize(v: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(v)
    return v / length if length > 0.0 else v


def _rotation_matrix(angle: float, axis) -> np.ndarray:
    x, y, z = _normalize(np.asarray(axis, dtype=float))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array([
        [c + x * x * t, x * y * t - z * s, x * z * t + y * s, 0.0],
        [y * x * t + z * s, c + y * y * t, y * z * t - x * s, 0.0],
        [z * x * t - y * s, z * y * t + x * s, c + z * z * t, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def _perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def _ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -1.0
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    return m


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


class Camera:
    """Perspective or orthographic camera; matrices act on column vectors."""

    def __init__(self, position, fov: float) -> None:
        self.fov = fov
        self.position = np.asarray(position, dtype=float)
        self.zoom = 1.0
        self.rotation = np.identity(4)
        self.perspective = True
        self.flipped = False
        self.aspect = 0.0
        self._update_vectors()

    def _transformed(self, vec) -> np.ndarray:
        return (self.rotation @ np.array([*vec, 1.0]))[:3]

    def _update_vectors(self) -> None:
        self.front = self._transformed((0.0, 0.0, -1.0))
        self.right = self._transformed((1.0, 0.0, 0.0))
        self.up = self._transformed((0.0, 1.0, 0.0))
        direction = self.front.copy()
        direction[1] = 0.0
        length = np.linalg.norm(direction)
        if length > 0.0:
            direction[0] /= length
            direction[2] /= length
        self.dir = direction

    def rotate(self, x: float, y: float, z: float) -> None:
        """Rotate by z, then y, then x radians about the camera's own axes."""
        self.rotation = (
            self.rotation
            @ _rotation_matrix(z, (0.0, 0.0, 1.0))
            @ _rotation_matrix(y, (0.0, 1.0, 0.0))
            @ _rotation_matrix(x, (1.0, 0.0, 0.0))
        )
        self._update_vectors()

    def projection(self, width: float, height: float) -> np.ndarray:
        """Return the projection matrix; width and height give the aspect if none is set."""
        aspect = self.aspect
        if aspect == 0.0:
            aspect = width / height
        if self.perspective:
            return _perspective(self.fov * self.zoom, aspect, _NEAR, _FAR)
        if self.flipped:
            return _ortho(0.0, self.fov * aspect, self.fov, 0.0)
        return _ortho(0.0, self.fov * aspect, 0.0, self.fov)

    def view(self, with_position: bool = True) -> np.ndarray:
        """Return the view matrix, placed at the origin unless with_position."""
        position = self.position if with_position else np.zeros(3)
        if self.perspective:
            return _look_at(position, position + self.front, self.up)
        m = np.identity(4)
        m[:3, 3] = position
        return m

    def proj_view(self, width: float, height: float) -> np.ndarray:
        """Return projection times view."""
        return self.projection(width, height) @ self.view()