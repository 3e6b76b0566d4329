"""Engine settings grouped by subsystem."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import ENGINE_VERSION_MAJOR, ENGINE_VERSION_MINOR


def _default_title() -> str:
    return f"VoxelEngine v{ENGINE_VERSION_MAJOR}.{ENGINE_VERSION_MINOR}"


@dataclass
class DisplaySettings:
    """Window and display options."""

    fullscreen: bool = False
    width: int = 1280
    height: int = 720
    # Anti-aliasing samples.
    samples: int = 0
    # 0 - unlimited fps, 1 - vsync.
    swap_interval: int = 1
    title: str = field(default_factory=_default_title)


@dataclass
class ChunksSettings:
    """Chunk loading options."""

    # Max milliseconds spent on chunk loading per frame.
    load_speed: int = 10
    # Radius of the loading zone, in chunks.
    load_distance: int = 22
    # Zone where chunks are not unloaded, in chunks.
    padding: int = 2


@dataclass
class CameraSettings:
    """Camera options."""

    fov_events: bool = True
    shaking: bool = True
    fov: float = 90.0
    sensitivity: float = 2.0


@dataclass
class GraphicsSettings:
    """Rendering options."""

    # Fog opacity exponent: 1.0 is linear, 2.0 is quadratic.
    fog_curve: float = 1.6
    backlight: bool = True
    frustum_culling: bool = True
    skybox_resolution: int = 64 + 32


@dataclass
class DebugSettings:
    """Debugging switches."""

    # Turns off chunk saving and loading.
    generator_test_mode: bool = False
    show_chunk_borders: bool = False
    do_write_lights: bool = True


@dataclass
class UiSettings:
    """User interface options."""

    language: str = "auto"


@dataclass
class EngineSettings:
    """All engine settings."""

    display: DisplaySettings = field(default_factory=DisplaySettings)
    chunks: ChunksSettings = field(default_factory=ChunksSettings)
    camera: CameraSettings = field(default_factory=CameraSettings)
    graphics: GraphicsSettings = field(default_factory=GraphicsSettings)
    debug: DebugSettings = field(default_factory=DebugSettings)
    ui: UiSettings = field(default_factory=UiSettings)