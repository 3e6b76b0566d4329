"""Engine-wide constants: versions, chunk geometry, block ids and binding names."""

ENGINE_VERSION_MAJOR = 0
ENGINE_VERSION_MINOR = 16

CHUNK_W = 16
CHUNK_H = 256
CHUNK_D = 16

# Count of voxels in one chunk.
CHUNK_VOL = CHUNK_W * CHUNK_H * CHUNK_D

# Block ids are stored in a single unsigned byte.
BLOCKID_MAX = 0xFF

# Marks a non-existing voxel (a voxel of a missing chunk).
BLOCK_VOID = BLOCKID_MAX
MAX_BLOCKS = BLOCK_VOID

BLOCK_AIR = 0

SHADERS_FOLDER = "shaders"
TEXTURES_FOLDER = "textures"
FONTS_FOLDER = "fonts"

TEXTURE_NOTFOUND = "notfound"

BIND_MOVE_FORWARD = "movement.forward"
BIND_MOVE_BACK = "movement.back"
BIND_MOVE_LEFT = "movement.left"
BIND_MOVE_RIGHT = "movement.right"
BIND_MOVE_JUMP = "movement.jump"
BIND_MOVE_SPRINT = "movement.sprint"
BIND_MOVE_CROUCH = "movement.crouch"
BIND_MOVE_CHEAT = "movement.cheat"
BIND_CAM_ZOOM = "camera.zoom"
BIND_CAM_MODE = "camera.mode"
BIND_PLAYER_NOCLIP = "player.noclip"
BIND_PLAYER_FLIGHT = "player.flight"
BIND_PLAYER_ATTACK = "player.attack"
BIND_PLAYER_BUILD = "player.build"
BIND_PLAYER_PICK = "player.pick"
BIND_HUD_INVENTORY = "hud.inventory"


def vox_index(x: int, y: int, z: int, w: int = CHUNK_W, d: int = CHUNK_D) -> int:
    """Return the flat index of a voxel in a y-major, then z, then x layout."""
    return (y * d + z) * w + x