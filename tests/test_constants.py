from voxelkit.constants import CHUNK_D, CHUNK_H, CHUNK_VOL, CHUNK_W, vox_index


def test_origin_is_zero():
    assert vox_index(0, 0, 0) == 0


def test_x_is_fastest_axis():
    assert vox_index(1, 0, 0) == vox_index(0, 0, 0) + 1


def test_layer_stride():
    assert vox_index(0, 1, 0) == CHUNK_W * CHUNK_D
    assert vox_index(0, 0, 1) == CHUNK_W


def test_last_index_of_chunk():
    assert vox_index(CHUNK_W - 1, CHUNK_H - 1, CHUNK_D - 1) == CHUNK_VOL - 1


def test_custom_dimensions_cover_range_exactly():
    w, h, d = 2, 4, 3
    indices = {
        vox_index(x, y, z, w, d)
        for y in range(h)
        for z in range(d)
        for x in range(w)
    }
    assert indices == set(range(w * h * d))


def test_custom_dimensions_strides():
    assert vox_index(0, 1, 0, 2, 3) == 6
    assert vox_index(0, 0, 1, 2, 3) == 2
    assert vox_index(1, 1, 1, 2, 3) == 9