"""Blocks, chunks, volumes, input state and camera math for a chunked voxel world."""

__version__ = "0.16.0"