"""A box of voxels with lights, copied out of the world for processing."""

from __future__ import annotations

import numpy as np

from .constants import BLOCK_VOID, vox_index


class VoxelsVolume:
    """w x h x d voxels whose lowest corner is at (x, y, z)."""

    def __init__(self, w: int, h: int, d: int, *, x: int = 0, y: int = 0, z: int = 0) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.w = w
        self.h = h
        self.d = d
        size = w * h * d
        self.ids = np.full(size, BLOCK_VOID, dtype=np.uint8)
        self.states = np.zeros(size, dtype=np.uint8)
        self.lights = np.zeros(size, dtype=np.uint16)

    def set_position(self, x: int, y: int, z: int) -> None:
        """Move the volume's corner without touching its contents."""
        self.x = x
        self.y = y
        self.z = z

    def _index(self, bx: int, by: int, bz: int) -> int | None:
        if (bx < self.x or by < self.y or bz < self.z
                or bx >= self.x + self.w or by >= self.y + self.h
                or bz >= self.z + self.d):
            return None
        return vox_index(bx - self.x, by - self.y, bz - self.z, self.w, self.d)

    def pick_block_id(self, bx: int, by: int, bz: int) -> int:
        """Return the block id at world position, or BLOCK_VOID outside."""
        index = self._index(bx, by, bz)
        return BLOCK_VOID if index is None else int(self.ids[index])

    def pick_light(self, bx: int, by: int, bz: int) -> int:
        """Return the packed light at world position, or 0 outside."""
        index = self._index(bx, by, bz)
        return 0 if index is None else int(self.lights[index])