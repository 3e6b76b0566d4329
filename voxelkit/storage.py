"""Map of all chunks held in memory, keyed by chunk position."""

from __future__ import annotations

from typing import Iterator

from .chunk import Chunk
from .constants import BLOCK_VOID, CHUNK_D, CHUNK_H, CHUNK_W
from .volume import VoxelsVolume


class ChunksStorage:
    """Chunks in memory, looked up by their (x, z) chunk position."""

    def __init__(self) -> None:
        self._chunks: dict[tuple[int, int], Chunk] = {}

    def store(self, chunk: Chunk) -> None:
        """Keep chunk, replacing any chunk stored at the same position."""
        self._chunks[(chunk.x, chunk.z)] = chunk

    def get(self, x: int, z: int) -> Chunk | None:
        """Return the chunk at (x, z), or None."""
        return self._chunks.get((x, z))

    def remove(self, x: int, z: int) -> None:
        """Forget the chunk at (x, z), if there is one."""
        self._chunks.pop((x, z), None)

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks.values())

    def get_voxels(self, volume: VoxelsVolume) -> None:
        """Fill volume from stored chunks; voxels of missing chunks become BLOCK_VOID."""
        x, y, z = volume.x, volume.y, volume.z
        w, h, d = volume.w, volume.h, volume.d
        ids = volume.ids.reshape(h, d, w)
        states = volume.states.reshape(h, d, w)
        lights = volume.lights.reshape(h, d, w)

        for cz in range(z // CHUNK_D, (z + d) // CHUNK_D + 1):
            z0 = max(z, cz * CHUNK_D)
            z1 = min(z + d, (cz + 1) * CHUNK_D)
            if z0 >= z1:
                continue
            for cx in range(x // CHUNK_W, (x + w) // CHUNK_W + 1):
                x0 = max(x, cx * CHUNK_W)
                x1 = min(x + w, (cx + 1) * CHUNK_W)
                if x0 >= x1:
                    continue
                target = (slice(None), slice(z0 - z, z1 - z), slice(x0 - x, x1 - x))
                chunk = self._chunks.get((cx, cz))
                if chunk is None:
                    ids[target] = BLOCK_VOID
                    lights[target] = 0
                    continue
                if y < 0 or y + h > CHUNK_H:
                    raise ValueError(
                        f"volume rows {y}..{y + h} fall outside the chunk height"
                    )
                source = (
                    slice(y, y + h),
                    slice(z0 - cz * CHUNK_D, z1 - cz * CHUNK_D),
                    slice(x0 - cx * CHUNK_W, x1 - cx * CHUNK_W),
                )
                shape = (CHUNK_H, CHUNK_D, CHUNK_W)
                ids[target] = chunk.ids.reshape(shape)[source]
                states[target] = chunk.states.reshape(shape)[source]
                lights[target] = chunk.lights.reshape(shape)[source]