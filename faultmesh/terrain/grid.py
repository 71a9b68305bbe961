"""
Grid Topology

Builds the rectangular vertex lattice and its two-triangles-per-cell
index list. Vertices are emitted row-major (row steps along y, column
along x); every later stage addresses vertices through that ordering.
"""
import logging
from typing import Tuple

import numpy as np

from faultmesh.exceptions import IndexOutOfRangeError, InvalidParameterError
from faultmesh.interfaces import GridSpec

logger = logging.getLogger(__name__)


def validate_grid(spec: GridSpec) -> None:
    """Raise InvalidParameterError if the lattice parameters are unusable."""
    errors = spec.validate()
    if errors:
        raise InvalidParameterError("; ".join(errors))


def vertex_index(row: int, col: int, div: int) -> int:
    """Convert a (row, col) grid coordinate to a flat vertex index.

    Args:
        row: Lattice row (y step), 0..div
        col: Lattice column (x step), 0..div
        div: Subdivisions per axis

    Returns:
        row * (div + 1) + col
    """
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise IndexOutOfRangeError(
                f"grid coordinate must be integers, got ({row!r}, {col!r})"
            )
    if not (0 <= row <= div and 0 <= col <= div):
        raise IndexOutOfRangeError(
            f"grid coordinate ({row}, {col}) out of range for div={div}"
        )
    return int(row * (div + 1) + col)


def vertex_row_col(index: int, div: int) -> Tuple[int, int]:
    """Inverse of vertex_index."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfRangeError(f"vertex index must be an integer, got {index!r}")
    n = (div + 1) ** 2
    if not 0 <= index < n:
        raise IndexOutOfRangeError(f"vertex index {index} out of range [0, {n})")
    row, col = divmod(int(index), div + 1)
    return row, col


def build_vertices(spec: GridSpec) -> np.ndarray:
    """Generate the vertex lattice with all heights at zero.

    Args:
        spec: Lattice parameters

    Returns:
        (n_vertices, 3) float64 positions
    """
    n = spec.div + 1
    steps = np.arange(n, dtype=np.float64)
    x_coords = spec.min_x + spec.delta_x * steps
    y_coords = spec.min_y + spec.delta_y * steps

    # meshgrid's default 'xy' indexing gives X[i, j] = x_j, Y[i, j] = y_i
    X, Y = np.meshgrid(x_coords, y_coords)
    vertices = np.stack([X.ravel(), Y.ravel(), np.zeros(n * n)], axis=1)

    return vertices


def build_faces(spec: GridSpec) -> np.ndarray:
    """Triangulate the lattice.

    Each cell contributes two triangles sharing its diagonal, emitted
    in row-major cell order.

    Args:
        spec: Lattice parameters

    Returns:
        (n_faces, 3) int64 face indices
    """
    div = spec.div
    nx = div + 1

    faces = []
    for i in range(div):
        for j in range(div):
            # Vertex indices for this cell
            v00 = i * nx + j
            v01 = v00 + 1
            v10 = v00 + nx
            v11 = v10 + 1

            # Two triangles
            faces.append([v00, v01, v10])
            faces.append([v01, v11, v10])

    return np.array(faces, dtype=np.int64).reshape(-1, 3)


def build_grid(spec: GridSpec) -> Tuple[np.ndarray, np.ndarray]:
    """Validate the lattice and build its vertex and face buffers.

    Returns:
        Tuple of (vertices, faces)
    """
    validate_grid(spec)

    vertices = build_vertices(spec)
    faces = build_faces(spec)
    logger.debug(
        "Built %d vertices and %d triangles for div=%d",
        len(vertices), len(faces), spec.div
    )
    return vertices, faces
