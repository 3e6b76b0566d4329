from voxelkit.constants import BLOCK_VOID, vox_index
from voxelkit.volume import VoxelsVolume


def test_new_volume_is_void():
    volume = VoxelsVolume(3, 4, 5)
    assert (volume.x, volume.y, volume.z) == (0, 0, 0)
    assert len(volume.ids) == 3 * 4 * 5
    assert (volume.ids == BLOCK_VOID).all()


def test_pick_inside_and_outside():
    volume = VoxelsVolume(4, 4, 4, x=10, y=20, z=30)
    index = vox_index(1, 2, 3, 4, 4)
    volume.ids[index] = 7
    volume.lights[index] = 0xABC
    assert volume.pick_block_id(11, 22, 33) == 7
    assert volume.pick_light(11, 22, 33) == 0xABC
    assert volume.pick_block_id(9, 22, 33) == BLOCK_VOID
    assert volume.pick_block_id(14, 22, 33) == BLOCK_VOID
    assert volume.pick_light(11, 24, 33) == 0


def test_set_position_moves_lookup():
    volume = VoxelsVolume(2, 2, 2)
    volume.ids[vox_index(0, 0, 0, 2, 2)] = 5
    assert volume.pick_block_id(0, 0, 0) == 5
    volume.set_position(-5, 1, 3)
    assert (volume.x, volume.y, volume.z) == (-5, 1, 3)
    assert volume.pick_block_id(-5, 1, 3) == 5
    assert volume.pick_block_id(0, 0, 0) == BLOCK_VOID


def test_corner_bounds_are_half_open():
    volume = VoxelsVolume(2, 3, 4, x=1, y=1, z=1)
    volume.ids[:] = 1
    assert volume.pick_block_id(1, 1, 1) == 1
    assert volume.pick_block_id(2, 3, 4) == 1
    assert volume.pick_block_id(3, 3, 4) == BLOCK_VOID
    assert volume.pick_block_id(2, 4, 4) == BLOCK_VOID
    assert volume.pick_block_id(2, 3, 5) == BLOCK_VOID