"""
py-landscape: procedural island terrain meshes from fractal noise.
"""

from .core import (
    InvalidParameterError,
    Landscape,
    MeshBuffers,
    TerrainMeshBuilder,
    TerrainParameters,
)

__version__ = "0.1.0"

__all__ = ['InvalidParameterError', 'Landscape', 'MeshBuffers', 'TerrainMeshBuilder',
           'TerrainParameters', '__version__']
