"""
Terrain mesh construction.

Walks a (resolution+1) x (resolution+1) grid, samples fractal noise at each
vertex, shapes it with the island falloff and emits vertex, color and
triangle buffers. Buffers are fresh read-only arrays on every call.
"""

import math
import numbers
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

import numpy as np
import structlog

from .errors import InvalidParameterError
from .fractal_noise import FractalNoiseEvaluator
from .gradient import GradientColorMapper
from .island_filter import IslandFilter

logger = structlog.get_logger()

# Brings typical peak heights into the gradient's [0, 1] domain.
HEIGHT_COLOR_NORMALIZER = 1.3


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class TerrainParameters:
    """Inputs for one terrain generation."""

    gain: float = 0.5
    lacunarity: float = 2.0
    octaves: int = 4
    scale: float = 5.0
    shift: Tuple[float, float] = (0.0, 0.0)
    seed: int = 0
    resolution: int = 128
    world_length: float = 256.0  # Reserved, not applied to vertex positions
    max_height: float = 50.0

    def __post_init__(self):
        object.__setattr__(self, "shift", tuple(float(s) for s in self.shift))

    def replace(self, **changes) -> "TerrainParameters":
        """Copy with some fields changed."""
        return replace(self, **changes)

    def validate(self) -> "TerrainParameters":
        """Raise InvalidParameterError for the first field out of contract."""
        if not _is_integer(self.resolution) or self.resolution < 1:
            raise InvalidParameterError("resolution", self.resolution, "must be an integer >= 1")
        if not _is_integer(self.octaves) or not 1 <= self.octaves <= 8:
            raise InvalidParameterError("octaves", self.octaves, "must be an integer in [1, 8]")
        if not 0 < self.gain <= 1:
            raise InvalidParameterError("gain", self.gain, "must be in (0, 1]")
        if not 1 <= self.lacunarity <= 3:
            raise InvalidParameterError("lacunarity", self.lacunarity, "must be in [1, 3]")
        if not self.scale > 0 or not math.isfinite(self.scale):
            raise InvalidParameterError("scale", self.scale, "must be a finite value > 0")
        if not self.max_height > 0 or not math.isfinite(self.max_height):
            raise InvalidParameterError("max_height", self.max_height, "must be a finite value > 0")
        if len(self.shift) != 2 or not all(math.isfinite(s) for s in self.shift):
            raise InvalidParameterError("shift", self.shift, "must be two finite values")
        if not _is_integer(self.seed):
            raise InvalidParameterError("seed", self.seed, "must be an integer")

        # numpy integers are accepted and stored as plain ints.
        for name in ("resolution", "octaves", "seed"):
            object.__setattr__(self, name, int(getattr(self, name)))
        return self


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class MeshBuffers:
    """
    One generated mesh.

    vertices are (x, height, z) rows in row-major grid order (z outer,
    x inner), colors are parallel RGBA rows and triangles is the flat index
    list, three entries per triangle.
    """

    vertices: np.ndarray
    colors: np.ndarray
    triangles: np.ndarray
    resolution: int = field(default=0)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    @property
    def heights(self) -> np.ndarray:
        return self.vertices[:, 1]

    def triangle_triples(self) -> np.ndarray:
        """Triangle indices reshaped to (triangle_count, 3)."""
        return self.triangles.reshape(-1, 3)

    def equals(self, other: "MeshBuffers") -> bool:
        """Exact equality of all three buffers."""
        return (
            np.array_equal(self.vertices, other.vertices)
            and np.array_equal(self.colors, other.colors)
            and np.array_equal(self.triangles, other.triangles)
        )


def build_triangle_indices(resolution: int) -> np.ndarray:
    """
    Triangle indices for a grid of resolution x resolution cells.

    y walks the vertex rows one cell at a time and skips the last column
    vertex at the end of each row.
    """
    triangles = np.zeros(6 * resolution * resolution, dtype=np.int32)
    index = 0
    y = 0
    for _z in range(resolution):
        for _x in range(resolution):
            triangles[index + 0] = y
            triangles[index + 1] = y + resolution + 1
            triangles[index + 2] = y + 1
            triangles[index + 3] = y + 1
            triangles[index + 4] = y + resolution + 1
            triangles[index + 5] = y + resolution + 2

            index += 6
            y += 1
        y += 1

    return triangles


def compute_vertex_normals(buffers: MeshBuffers) -> np.ndarray:
    """
    Per-vertex normals from the triangle list.

    Face normals are area weighted, summed onto their vertices and
    normalized. Vertices with no usable faces get (0, 1, 0).
    """
    vertices = buffers.vertices.astype(np.float64)
    faces = buffers.triangle_triples()

    v0 = vertices[faces[:, 0]]
    v1 = vertices[faces[:, 1]]
    v2 = vertices[faces[:, 2]]
    face_normals = np.cross(v1 - v0, v2 - v0)

    normals = np.zeros_like(vertices)
    for corner in range(3):
        np.add.at(normals, faces[:, corner], face_normals)

    lengths = np.linalg.norm(normals, axis=1)
    degenerate = lengths == 0
    lengths[degenerate] = 1.0
    normals /= lengths[:, None]
    normals[degenerate] = (0.0, 1.0, 0.0)

    return normals.astype(np.float32)


class TerrainMeshBuilder:
    """
    Builds terrain mesh buffers from TerrainParameters.

    Collaborators can be injected for testing; by default the builder uses
    OpenSimplex noise with Alea jitter, the radial island filter and the
    terrain gradient.
    """

    def __init__(
        self,
        evaluator: Optional[FractalNoiseEvaluator] = None,
        island_filter: Optional[IslandFilter] = None,
        gradient: Optional[GradientColorMapper] = None,
    ):
        self.evaluator = evaluator if evaluator is not None else FractalNoiseEvaluator()
        self.island_filter = island_filter if island_filter is not None else IslandFilter()
        self.gradient = gradient if gradient is not None else GradientColorMapper.terrain()

    def generate(self, params: TerrainParameters) -> MeshBuffers:
        """
        Generate vertex, color and triangle buffers.

        Args:
            params: Terrain parameters

        Returns:
            MeshBuffers snapshot

        Raises:
            InvalidParameterError: if params are out of contract
        """
        params.validate()

        resolution = params.resolution
        side = resolution + 1
        vertices = np.zeros((side * side, 3), dtype=np.float32)
        color_positions = np.zeros(side * side, dtype=np.float64)
        color_divisor = params.max_height * params.gain / HEIGHT_COLOR_NORMALIZER

        index = 0
        for z in range(side):
            for x in range(side):
                # Noise is sampled at (z, x), not (x, z).
                f = self.evaluator.evaluate(
                    (z, x),
                    params.gain,
                    params.lacunarity,
                    params.octaves,
                    params.scale,
                    params.shift,
                    params.seed,
                )
                h = self.island_filter.apply(x, f, z, resolution) * params.max_height * params.gain
                vertices[index] = (x, h, z)
                color_positions[index] = h / color_divisor
                index += 1

        colors = np.asarray(self.gradient.evaluate(color_positions), dtype=np.float32)
        triangles = build_triangle_indices(resolution)

        logger.info(
            "Generated terrain mesh",
            resolution=resolution,
            octaves=params.octaves,
            seed=params.seed,
            vertices=len(vertices),
            triangles=len(triangles) // 3,
        )

        return MeshBuffers(
            vertices=_frozen(vertices),
            colors=_frozen(colors),
            triangles=_frozen(triangles),
            resolution=resolution,
        )
