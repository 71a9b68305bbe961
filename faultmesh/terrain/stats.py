"""Mesh statistics and debug dumps."""
import logging
from typing import List

import numpy as np

from faultmesh.interfaces import Mesh
from faultmesh.terrain.edges import unique_edges
from faultmesh.terrain.normals import compute_face_areas

logger = logging.getLogger(__name__)


def mesh_stats(mesh: Mesh) -> dict:
    """
    Compute mesh statistics.

    Returns:
        Dictionary with mesh properties
    """
    areas = compute_face_areas(mesh.vertices, mesh.faces)
    normal_lengths = np.linalg.norm(mesh.normals, axis=1)

    return {
        'n_vertices': mesh.n_vertices,
        'n_faces': mesh.n_faces,
        'n_edges': mesh.n_edges,
        'n_unique_edges': len(unique_edges(mesh.edges)),
        'total_area': float(np.sum(areas)),
        'min_area': float(np.min(areas)),
        'max_area': float(np.max(areas)),
        'min_z': mesh.height_interval.min_z,
        'max_z': mesh.height_interval.max_z,
        'mean_z': float(np.mean(mesh.vertices[:, 2])),
        'thresholds': list(mesh.thresholds.as_tuple()),
        'max_normal_error': float(np.max(np.abs(normal_lengths - 1.0))),
    }


def format_buffers(mesh: Mesh) -> List[str]:
    """Render vertices and triangles as 'v x y z' / 'f a b c' lines."""
    lines = [f"v {x} {y} {z}" for x, y, z in mesh.vertices.tolist()]
    lines.extend(f"f {a} {b} {c}" for a, b, c in mesh.faces.tolist())
    return lines


def dump_buffers(mesh: Mesh) -> None:
    """Log vertex and triangle buffers at DEBUG level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    for line in format_buffers(mesh):
        logger.debug(line)
