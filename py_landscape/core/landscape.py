"""
Landscape controller.

Owns the current TerrainParameters and the dirty flag, and hands freshly
generated buffers to a mesh sink. Parameter updates mark the landscape
dirty and are coalesced until the next regenerate_if_dirty() poll; the
octave, gain and lacunarity setters regenerate immediately.
"""

from typing import Optional, Protocol

import numpy as np
import structlog

from .terrain_mesh import MeshBuffers, TerrainMeshBuilder, TerrainParameters, compute_vertex_normals

logger = structlog.get_logger()


class MeshSink(Protocol):
    """Receiver of generated meshes (renderer, exporter, test double)."""

    def set_mesh(self, buffers: MeshBuffers) -> None:
        ...

    def recalculate_normals(self) -> None:
        ...


class InMemoryMeshSink:
    """Keeps the latest mesh and its normals in memory."""

    def __init__(self):
        self.buffers: Optional[MeshBuffers] = None
        self.normals: Optional[np.ndarray] = None
        self.uploads = 0

    def set_mesh(self, buffers: MeshBuffers) -> None:
        self.buffers = buffers
        self.normals = None
        self.uploads += 1

    def recalculate_normals(self) -> None:
        if self.buffers is None:
            return
        self.normals = compute_vertex_normals(self.buffers)


class Landscape:
    """
    Terrain lifecycle around a TerrainMeshBuilder.

    Starts dirty so the first poll generates. A rejected generation leaves
    both the parameters and the previous mesh untouched.

    Example:
        landscape = Landscape(TerrainParameters(resolution=64))
        landscape.regenerate_if_dirty()
        landscape.set_octaves(6)
        mesh = landscape.mesh
    """

    def __init__(
        self,
        params: Optional[TerrainParameters] = None,
        builder: Optional[TerrainMeshBuilder] = None,
        sink: Optional[MeshSink] = None,
    ):
        self._params = (params if params is not None else TerrainParameters()).validate()
        self.builder = builder if builder is not None else TerrainMeshBuilder()
        self.sink = sink if sink is not None else InMemoryMeshSink()
        self._mesh: Optional[MeshBuffers] = None
        self._dirty = True
        self.generation_count = 0

    @property
    def params(self) -> TerrainParameters:
        return self._params

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def mesh(self) -> Optional[MeshBuffers]:
        """Last successfully generated mesh."""
        return self._mesh

    def update_parameters(self, **changes) -> TerrainParameters:
        """Apply parameter changes and mark the landscape dirty."""
        params = self._params.replace(**changes).validate()
        self._params = params
        self._dirty = True
        logger.debug("Terrain parameters updated", changes=sorted(changes))
        return params

    def regenerate_if_dirty(self) -> bool:
        """Regenerate when dirty. Returns True if a mesh was generated."""
        if not self._dirty:
            return False

        self.regenerate()
        return True

    def regenerate(self) -> MeshBuffers:
        """Generate unconditionally and hand the mesh to the sink."""
        return self._publish(self.builder.generate(self._params))

    def _publish(self, buffers: MeshBuffers) -> MeshBuffers:
        # State is committed before the sink sees the mesh.
        self._mesh = buffers
        self._dirty = False
        self.generation_count += 1

        self.sink.set_mesh(buffers)
        self.sink.recalculate_normals()
        return buffers

    def _set_and_regenerate(self, **changes) -> MeshBuffers:
        params = self._params.replace(**changes).validate()
        buffers = self.builder.generate(params)
        self._params = params
        return self._publish(buffers)

    def set_octaves(self, value: float) -> MeshBuffers:
        """Set the octave count (truncated to int) and regenerate."""
        logger.info("Adjusting octaves", octaves=value)
        return self._set_and_regenerate(octaves=int(value))

    def set_gain(self, value: float) -> MeshBuffers:
        """Set gain and regenerate."""
        logger.info("Adjusting gain", gain=value)
        return self._set_and_regenerate(gain=float(value))

    def set_lacunarity(self, value: float) -> MeshBuffers:
        """Set lacunarity and regenerate."""
        logger.info("Adjusting lacunarity", lacunarity=value)
        return self._set_and_regenerate(lacunarity=float(value))
