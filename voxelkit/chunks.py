"""Player-centred matrix of loaded chunks."""

from __future__ import annotations

import math
from typing import Protocol, Sequence

from .block import AABB, Block
from .chunk import Chunk
from .constants import CHUNK_D, CHUNK_H, CHUNK_W, vox_index
from .levelevents import LevelEventType, LevelEvents
from .voxel import Voxel


class ChunkSink(Protocol):
    """Anything that chunks leaving the matrix can be handed to for saving."""

    def put(self, chunk: Chunk) -> None: ...


class Chunks:
    """A w x d grid of chunk slots whose corner is at chunk position (ox, oz)."""

    def __init__(
        self,
        w: int,
        d: int,
        ox: int,
        oz: int,
        world_files: ChunkSink | None,
        events: LevelEvents,
        blocks: Sequence[Block],
    ) -> None:
        self.w = w
        self.d = d
        self.ox = ox
        self.oz = oz
        self.world_files = world_files
        self.events = events
        self.blocks = blocks
        self.chunks: list[Chunk | None] = [None] * (w * d)
        self.chunks_count = 0

    @property
    def volume(self) -> int:
        """Number of chunk slots."""
        return self.w * self.d

    def _in_bounds(self, cx: int, cz: int) -> bool:
        return 0 <= cx < self.w and 0 <= cz < self.d

    def put_chunk(self, chunk: Chunk) -> bool:
        """Place chunk in its slot; return False if it lies outside the matrix."""
        x = chunk.x - self.ox
        z = chunk.z - self.oz
        if not self._in_bounds(x, z):
            return False
        self.chunks[z * self.w + x] = chunk
        self.chunks_count += 1
        return True

    def get_chunk(self, x: int, z: int) -> Chunk | None:
        """Return the chunk at chunk position (x, z), if loaded."""
        x -= self.ox
        z -= self.oz
        if not self._in_bounds(x, z):
            return None
        return self.chunks[z * self.w + x]

    def get_chunk_by_voxel(self, x: int, y: int, z: int) -> Chunk | None:
        """Return the chunk holding the voxel at world position (x, y, z)."""
        if y < 0 or y >= CHUNK_H:
            return None
        cx = (x - self.ox * CHUNK_W) // CHUNK_W
        cz = (z - self.oz * CHUNK_D) // CHUNK_D
        if not self._in_bounds(cx, cz):
            return None
        return self.chunks[cz * self.w + cx]

    def _locate(self, x: int, y: int, z: int) -> tuple[Chunk, int, int, int] | None:
        if y < 0 or y >= CHUNK_H:
            return None
        x -= self.ox * CHUNK_W
        z -= self.oz * CHUNK_D
        cx = x // CHUNK_W
        cz = z // CHUNK_D
        if not self._in_bounds(cx, cz):
            return None
        chunk = self.chunks[cz * self.w + cx]
        if chunk is None:
            return None
        return chunk, x - cx * CHUNK_W, y, z - cz * CHUNK_D

    def get(self, x: int, y: int, z: int) -> Voxel | None:
        """Return the voxel at world position, or None if its chunk is missing."""
        found = self._locate(x, y, z)
        if found is None:
            return None
        chunk, lx, ly, lz = found
        return chunk.voxel(vox_index(lx, ly, lz))

    def set(self, x: int, y: int, z: int, block_id: int, states: int) -> None:
        """Set a voxel, marking its chunk and touched neighbours as modified."""
        found = self._locate(x, y, z)
        if found is None:
            return
        chunk, lx, _, lz = found
        index = vox_index(lx, y, lz)
        chunk.ids[index] = block_id
        chunk.states[index] = states
        chunk.unsaved = True
        chunk.modified = True

        if y < chunk.bottom:
            chunk.bottom = y
        elif y + 1 > chunk.top:
            chunk.top = y + 1
        elif block_id == 0:
            chunk.update_heights()

        cx, cz = chunk.x, chunk.z
        neighbours = []
        if lx == 0:
            neighbours.append((cx - 1, cz))
        if lz == 0:
            neighbours.append((cx, cz - 1))
        if lx == CHUNK_W - 1:
            neighbours.append((cx + 1, cz))
        if lz == CHUNK_D - 1:
            neighbours.append((cx, cz + 1))
        for nx, nz in neighbours:
            neighbour = self.get_chunk(nx, nz)
            if neighbour is not None:
                neighbour.modified = True

    def is_obstacle(self, x: float, y: float, z: float) -> AABB | None:
        """Return the hitbox blocking the point (x, y, z), if any."""
        ix, iy, iz = math.floor(x), math.floor(y), math.floor(z)
        voxel = self.get(ix, iy, iz)
        if voxel is None:
            return None
        block = self.blocks[voxel.id]
        if not block.obstacle:
            return None
        hitbox = block.rt.hitboxes[voxel.rotation()] if block.rotatable else block.hitbox
        if block.rt.solid:
            return hitbox
        if hitbox.inside((x - ix, y - iy, z - iz)):
            return hitbox
        return None

    def set_offset(self, x: int, z: int) -> None:
        """Change the matrix offset without moving the chunks inside."""
        self.ox = x
        self.oz = z

    def set_center(self, x: int, z: int) -> None:
        """Shift the matrix so that world position (x, z) is in its middle."""
        cx = x // CHUNK_W - (self.ox + self.w // 2)
        cz = z // CHUNK_D - (self.oz + self.d // 2)
        if cx or cz:
            self.translate(cx, cz)

    def translate(self, dx: int, dz: int) -> None:
        """Move the matrix by (dx, dz) chunks, hiding chunks that fall out."""
        moved: list[Chunk | None] = [None] * self.volume
        for z in range(self.d):
            for x in range(self.w):
                chunk = self.chunks[z * self.w + x]
                if chunk is None:
                    continue
                nx = x - dx
                nz = z - dz
                if not self._in_bounds(nx, nz):
                    self.events.trigger(LevelEventType.CHUNK_HIDDEN, chunk)
                    if self.world_files is not None:
                        self.world_files.put(chunk)
                    self.chunks_count -= 1
                    continue
                moved[nz * self.w + nx] = chunk
        self.chunks = moved
        self.ox += dx
        self.oz += dz

    def resize(self, new_w: int, new_d: int) -> None:
        """Change the matrix size, dropping chunks outside the new size."""
        if new_w < self.w:
            delta = self.w - new_w
            self.translate(delta // 2, 0)
            self.translate(-delta, 0)
            self.translate(delta, 0)
        if new_d < self.d:
            delta = self.d - new_d
            self.translate(0, delta // 2)
            self.translate(0, -delta)
            self.translate(0, delta)
        resized: list[Chunk | None] = [None] * (new_w * new_d)
        for z in range(min(self.d, new_d)):
            for x in range(min(self.w, new_w)):
                resized[z * new_w + x] = self.chunks[z * self.w + x]
        self.w = new_w
        self.d = new_d
        self.chunks = resized

    def save_and_clear(self) -> None:
        """Hand every chunk to storage, fire hide events and empty the matrix."""
        for chunk in self.chunks:
            if chunk is not None:
                if self.world_files is not None:
                    self.world_files.put(chunk)
                self.events.trigger(LevelEventType.CHUNK_HIDDEN, chunk)
        self.chunks = [None] * self.volume
        self.chunks_count = 0