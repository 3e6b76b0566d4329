from voxelkit.constants import ENGINE_VERSION_MAJOR, ENGINE_VERSION_MINOR
from voxelkit.settings import (
    CameraSettings,
    ChunksSettings,
    DebugSettings,
    DisplaySettings,
    EngineSettings,
    GraphicsSettings,
    UiSettings,
)


def test_display_defaults():
    display = DisplaySettings()
    assert (display.width, display.height) == (1280, 720)
    assert display.fullscreen is False
    assert display.swap_interval == 1


def test_title_carries_version():
    title = DisplaySettings().title
    assert title.endswith(f"v{ENGINE_VERSION_MAJOR}.{ENGINE_VERSION_MINOR}")


def test_chunks_defaults():
    chunks = ChunksSettings()
    assert chunks.load_distance == 22
    assert chunks.padding == 2
    assert chunks.load_speed == 10


def test_camera_and_graphics_defaults():
    assert CameraSettings().fov == 90.0
    assert GraphicsSettings().skybox_resolution == 64 + 32
    assert GraphicsSettings().fog_curve == 1.6


def test_debug_and_ui_defaults():
    assert DebugSettings().do_write_lights is True
    assert DebugSettings().generator_test_mode is False
    assert UiSettings().language == "auto"


def test_engine_settings_instances_are_independent():
    first = EngineSettings()
    second = EngineSettings()
    first.display.width = 640
    first.ui.language = "ru_RU"
    assert second.display.width == 1280
    assert second.ui.language == "auto"
    assert first.chunks == ChunksSettings()