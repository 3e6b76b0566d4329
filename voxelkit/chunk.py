"""A column of voxels with its flags and serialized form."""

from __future__ import annotations

import enum

import numpy as np

from .constants import CHUNK_D, CHUNK_H, CHUNK_VOL, CHUNK_W
from .voxel import Voxel

CHUNK_DATA_LEN = CHUNK_VOL * 2

_LAYER = CHUNK_D * CHUNK_W
_INITIAL_BLOCK_ID = 2


class ChunkFlag(enum.IntFlag):
    """State bits of a chunk."""

    MODIFIED = 0x1
    READY = 0x2
    LOADED = 0x4
    LIGHTED = 0x8
    UNSAVED = 0x10
    LOADED_LIGHTS = 0x20


def _flag_property(mask: ChunkFlag, doc: str) -> property:
    def getter(self: Chunk) -> bool:
        return bool(self.flags & mask)

    def setter(self: Chunk, value: bool) -> None:
        self.set_flags(mask, value)

    return property(getter, setter, doc=doc)


class Chunk:
    """CHUNK_W x CHUNK_H x CHUNK_D voxels at chunk position (x, z)."""

    def __init__(self, x: int, z: int) -> None:
        self.x = x
        self.z = z
        self.bottom = 0
        self.top = CHUNK_H
        self.ids = np.full(CHUNK_VOL, _INITIAL_BLOCK_ID, dtype=np.uint8)
        self.states = np.zeros(CHUNK_VOL, dtype=np.uint8)
        self.lights = np.zeros(CHUNK_VOL, dtype=np.uint16)
        self.flags = ChunkFlag(0)
        self.surrounding = 0

    def voxel(self, index: int) -> Voxel:
        """Return a copy of the voxel at a flat index."""
        return Voxel(int(self.ids[index]), int(self.states[index]))

    def is_empty(self) -> bool:
        """Return True if every voxel holds the same block id."""
        return bool((self.ids == self.ids[0]).all())

    def update_heights(self) -> None:
        """Recompute the lowest and highest non-air layers."""
        filled = np.flatnonzero(self.ids)
        if filled.size == 0:
            return
        self.bottom = int(filled[0]) // _LAYER
        self.top = int(filled[-1]) // _LAYER + 1

    def clone(self) -> Chunk:
        """Return a new chunk at the same position with copied voxels and lights."""
        other = Chunk(self.x, self.z)
        other.ids[:] = self.ids
        other.states[:] = self.states
        other.lights[:] = self.lights
        return other

    def set_flags(self, mask: int, value: bool) -> None:
        """Set or clear the bits of mask."""
        if value:
            self.flags |= mask
        else:
            self.flags &= ~ChunkFlag(mask)

    unsaved = _flag_property(ChunkFlag.UNSAVED, "Chunk has changes not yet saved.")
    modified = _flag_property(ChunkFlag.MODIFIED, "Chunk needs to be rebuilt.")
    lighted = _flag_property(ChunkFlag.LIGHTED, "Chunk lighting is computed.")
    loaded = _flag_property(ChunkFlag.LOADED, "Chunk was loaded from storage.")
    loaded_lights = _flag_property(
        ChunkFlag.LOADED_LIGHTS, "Chunk lights were loaded from storage."
    )
    ready = _flag_property(ChunkFlag.READY, "Chunk is ready to be used.")

    def encode(self) -> bytes:
        """Serialize as [voxel ids...][voxel states...]."""
        return self.ids.tobytes() + self.states.tobytes()

    def decode(self, data) -> None:
        """Load voxel ids and states from data produced by encode()."""
        if len(data) < CHUNK_DATA_LEN:
            raise ValueError(
                f"chunk data too short: {len(data)} < {CHUNK_DATA_LEN} bytes"
            )
        raw = np.frombuffer(bytes(data[:CHUNK_DATA_LEN]), dtype=np.uint8)
        self.ids[:] = raw[:CHUNK_VOL]
        self.states[:] = raw[CHUNK_VOL:]

    def __repr__(self) -> str:
        return f"Chunk(x={self.x}, z={self.z})"