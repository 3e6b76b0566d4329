"""A single voxel: block id plus packed state bits."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_DIR_NORTH = 0x0
BLOCK_DIR_WEST = 0x1
BLOCK_DIR_SOUTH = 0x2
BLOCK_DIR_EAST = 0x3
BLOCK_DIR_UP = 0x4
BLOCK_DIR_DOWN = 0x5

# Limited to 16 block orientations.
BLOCK_ROT_MASK = 0xF
# Limited to 16 block variants.
BLOCK_VARIANT_MASK = 0xF0


@dataclass
class Voxel:
    """Block id and state byte (rotation in the low nibble, variant in the high)."""

    id: int
    states: int = 0

    def rotation(self) -> int:
        """Return the rotation index stored in the states."""
        return self.states & BLOCK_ROT_MASK

    def variant(self) -> int:
        """Return the variant index stored in the states."""
        return (self.states & BLOCK_VARIANT_MASK) >> 4