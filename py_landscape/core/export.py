"""
Mesh serialization.

JSON-ready dictionaries for the API and Wavefront OBJ text (with the
common per-vertex color extension) for external tools.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np

from .terrain_mesh import MeshBuffers


def mesh_to_dict(buffers: MeshBuffers, normals: Optional[np.ndarray] = None) -> Dict[str, Any]:
    """Plain-list representation of a mesh."""
    heights = buffers.heights
    data = {
        "resolution": buffers.resolution,
        "vertex_count": buffers.vertex_count,
        "triangle_count": buffers.triangle_count,
        "min_height": float(heights.min()) if len(heights) else 0.0,
        "max_height": float(heights.max()) if len(heights) else 0.0,
        "vertices": buffers.vertices.tolist(),
        "colors": buffers.colors.tolist(),
        "triangles": buffers.triangles.tolist(),
    }
    if normals is not None:
        data["normals"] = np.asarray(normals).tolist()
    return data


def mesh_to_obj(buffers: MeshBuffers, normals: Optional[np.ndarray] = None) -> str:
    """
    Wavefront OBJ text for a mesh.

    Vertex lines carry RGB after the position; face indices are 1-based.
    """
    lines = [
        "# py-landscape terrain mesh",
        f"# vertices {buffers.vertex_count} triangles {buffers.triangle_count}",
    ]

    for (x, y, z), (r, g, b, _a) in zip(buffers.vertices, buffers.colors):
        lines.append(f"v {x:.6f} {y:.6f} {z:.6f} {r:.4f} {g:.4f} {b:.4f}")

    if normals is not None:
        for nx, ny, nz in normals:
            lines.append(f"vn {nx:.6f} {ny:.6f} {nz:.6f}")

    for a, b, c in buffers.triangle_triples() + 1:
        if normals is not None:
            lines.append(f"f {a}//{a} {b}//{b} {c}//{c}")
        else:
            lines.append(f"f {a} {b} {c}")

    return "\n".join(lines) + "\n"


def write_obj(
    buffers: MeshBuffers, path: Union[str, Path], normals: Optional[np.ndarray] = None
) -> Path:
    """Write a mesh to an OBJ file and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(mesh_to_obj(buffers, normals))
    return path
