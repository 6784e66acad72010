"""Voxel world core: vectors, blocks, noise terrain, chunk meshing, frustum culling and entity physics."""

__version__ = "0.1.0"