"""Block definitions, hitboxes and rotation profiles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar

from .constants import TEXTURE_NOTFOUND

FACE_MX = 0
FACE_PX = 1
FACE_MY = 2
FACE_PY = 3
FACE_MZ = 4
FACE_PZ = 5

BLOCK_AABB_GRID = 16

Vec3 = tuple


@dataclass(frozen=True)
class AABB:
    """Axis-aligned box given by two opposite corners."""

    a: tuple[float, float, float] = (0.0, 0.0, 0.0)
    b: tuple[float, float, float] = (1.0, 1.0, 1.0)

    def inside(self, pos) -> bool:
        """Return True if pos lies within the box, borders included."""
        return all(
            min(ca, cb) <= p <= max(ca, cb)
            for p, ca, cb in zip(pos, self.a, self.b)
        )


@dataclass(frozen=True)
class CoordSystem:
    """Integer basis used to rotate block hitboxes."""

    axis_x: tuple[int, int, int]
    axis_y: tuple[int, int, int]
    axis_z: tuple[int, int, int]
    # Grid position fix offset (for negative vectors).
    fix: tuple[int, int, int] = (0, 0, 0)
    fix2: tuple[int, int, int] = field(init=False)

    def __post_init__(self) -> None:
        fix2 = [0, 0, 0]
        for axis in (self.axis_x, self.axis_y, self.axis_z):
            if self.is_vector_has_negatives(axis):
                fix2 = [f - c for f, c in zip(fix2, axis)]
        object.__setattr__(self, "fix2", tuple(fix2))

    @staticmethod
    def is_vector_has_negatives(vec) -> bool:
        """Return True if any component of vec is negative."""
        return any(c < 0 for c in vec)

    def _map(self, point) -> tuple[float, float, float]:
        px, py, pz = point
        return tuple(
            float(px * ax + py * ay + pz * az + f)
            for ax, ay, az, f in zip(self.axis_x, self.axis_y, self.axis_z, self.fix2)
        )

    def transform(self, aabb: AABB) -> AABB:
        """Return aabb expressed in this coordinate system."""
        return AABB(self._map(aabb.a), self._map(aabb.b))


@dataclass(frozen=True)
class BlockRotProfile:
    """Named set of rotation variants a block may take."""

    MAX_COUNT: ClassVar[int] = 16
    PIPE: ClassVar[BlockRotProfile]
    PANE: ClassVar[BlockRotProfile]

    name: str
    variants: tuple[CoordSystem, ...]

    def __post_init__(self) -> None:
        if len(self.variants) > self.MAX_COUNT:
            raise ValueError(
                f"rotation profile {self.name!r} has more than "
                f"{self.MAX_COUNT} variants"
            )
        object.__setattr__(self, "variants", tuple(self.variants))


# Wood logs, pillars, pipes.
BlockRotProfile.PIPE = BlockRotProfile("pipe", (
    CoordSystem((1, 0, 0), (0, 0, 1), (0, -1, 0), (0, 0, -1)),   # North
    CoordSystem((0, 0, 1), (-1, 0, 0), (0, -1, 0), (1, 0, -1)),  # East
    CoordSystem((-1, 0, 0), (0, 0, -1), (0, -1, 0), (1, 0, 0)),  # South
    CoordSystem((0, 0, -1), (1, 0, 0), (0, -1, 0), (0, 0, 0)),   # West
    CoordSystem((1, 0, 0), (0, 1, 0), (0, 0, 1), (0, 0, 0)),     # Up
    CoordSystem((1, 0, 0), (0, -1, 0), (0, 0, -1), (0, 1, -1)),  # Down
))

# Doors, signs and other panes.
BlockRotProfile.PANE = BlockRotProfile("pane", (
    CoordSystem((1, 0, 0), (0, 1, 0), (0, 0, 1), (0, 0, 0)),     # North
    CoordSystem((0, 0, -1), (0, 1, 0), (1, 0, 0), (1, 0, 0)),    # East
    CoordSystem((-1, 0, 0), (0, 1, 0), (0, 0, -1), (1, 0, -1)),  # South
    CoordSystem((0, 0, 1), (0, 1, 0), (-1, 0, 0), (0, 0, -1)),   # West
))


class BlockModel(enum.Enum):
    """How a block is drawn."""

    none = "none"  # invisible
    block = "block"  # default shape
    xsprite = "X"  # X-shape (grass)
    aabb = "aabb"  # box shaped as the block hitbox


@dataclass
class BlockRuntime:
    """Values computed for a block when content is built."""

    id: int = 0
    solid: bool = True
    emissive: bool = False
    hitboxes: list[AABB] = field(
        default_factory=lambda: [AABB() for _ in range(BlockRotProfile.MAX_COUNT)]
    )


class Block:
    """Definition of one block type."""

    def __init__(self, name: str, texture: str = TEXTURE_NOTFOUND) -> None:
        self._name = name
        # Order: -x, x, -y, y, -z, z
        self.texture_faces: list[str] = [texture] * 6
        self.emission: list[int] = [0, 0, 0, 0]
        self.draw_group = 0
        self.model = BlockModel.block
        self.light_passing = False
        self.sky_light_passing = False
        self.obstacle = True
        self.selectable = True
        self.replaceable = False
        self.breakable = True
        self.rotatable = False
        self.hitbox = AABB()
        self.rotations = BlockRotProfile.PIPE
        self.rt = BlockRuntime()

    @property
    def name(self) -> str:
        """The block's full name; fixed at creation."""
        return self._name

    def __repr__(self) -> str:
        return f"Block({self._name!r})"