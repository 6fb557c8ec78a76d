"""
Core terrain generation functionality.
"""

from .alea_prng import AleaPRNG
from .errors import InvalidParameterError
from .noise_source import NoiseSource, OpenSimplexNoise2D
from .fractal_noise import FractalNoiseEvaluator
from .island_filter import IslandFilter
from .gradient import GradientColorMapper
from .terrain_mesh import (
    HEIGHT_COLOR_NORMALIZER,
    MeshBuffers,
    TerrainMeshBuilder,
    TerrainParameters,
    build_triangle_indices,
    compute_vertex_normals,
)
from .landscape import InMemoryMeshSink, Landscape, MeshSink
from .export import mesh_to_dict, mesh_to_obj, write_obj

__all__ = ['AleaPRNG', 'InvalidParameterError', 'NoiseSource', 'OpenSimplexNoise2D',
           'FractalNoiseEvaluator', 'IslandFilter', 'GradientColorMapper',
           'HEIGHT_COLOR_NORMALIZER', 'MeshBuffers', 'TerrainMeshBuilder', 'TerrainParameters',
           'build_triangle_indices', 'compute_vertex_normals',
           'InMemoryMeshSink', 'Landscape', 'MeshSink',
           'mesh_to_dict', 'mesh_to_obj', 'write_obj']
