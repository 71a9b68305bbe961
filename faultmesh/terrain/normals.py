"""Vertex normal estimation from triangle geometry."""
import logging
from typing import Tuple

import numpy as np
from scipy import sparse

logger = logging.getLogger(__name__)

DEFAULT_NORMAL: Tuple[float, float, float] = (0.0, 0.0, 1.0)


def compute_face_normals(
    vertices: np.ndarray,
    faces: np.ndarray,
    normalize: bool = False
) -> np.ndarray:
    """
    Compute the normal of each face as (v2 - v1) × (v3 - v1).

    Unnormalized normals have length twice the face area, so summing
    them weights each face by its area.

    Args:
        vertices: (N, 3) vertex positions
        faces: (M, 3) face indices
        normalize: Scale each normal to unit length

    Returns:
        (M, 3) face normals
    """
    v1 = vertices[faces[:, 0]]
    v2 = vertices[faces[:, 1]]
    v3 = vertices[faces[:, 2]]

    normals = np.cross(v2 - v1, v3 - v1)

    if normalize:
        norms = np.linalg.norm(normals, axis=1, keepdims=True)
        normals = np.divide(
            normals, norms, out=np.zeros_like(normals), where=norms > 1e-12
        )

    return normals


def compute_face_areas(vertices: np.ndarray, faces: np.ndarray) -> np.ndarray:
    """Compute area of each face."""
    return 0.5 * np.linalg.norm(compute_face_normals(vertices, faces), axis=1)


def incidence_matrix(faces: np.ndarray, n_vertices: int) -> sparse.csr_matrix:
    """
    Build the vertex/face incidence matrix.

    Entry (v, f) is 1 when face f uses vertex v.

    Args:
        faces: (M, 3) face indices
        n_vertices: Number of vertices

    Returns:
        (n_vertices, M) sparse matrix
    """
    n_faces = len(faces)
    rows = faces.ravel()
    cols = np.repeat(np.arange(n_faces), 3)
    data = np.ones(len(rows), dtype=np.float64)

    return sparse.csr_matrix((data, (rows, cols)), shape=(n_vertices, n_faces))


def vertex_face_counts(faces: np.ndarray, n_vertices: int) -> np.ndarray:
    """Number of faces incident on each vertex."""
    return np.bincount(faces.ravel(), minlength=n_vertices)


def accumulate_vertex_normals(
    vertices: np.ndarray,
    faces: np.ndarray
) -> np.ndarray:
    """
    Sum the unnormalized normal of every incident face at each vertex.

    Each face contributes exactly once to each of its three vertices.

    Args:
        vertices: (N, 3) vertex positions
        faces: (M, 3) face indices

    Returns:
        (N, 3) accumulated (unnormalized) normals
    """
    face_normals = compute_face_normals(vertices, faces)
    incidence = incidence_matrix(faces, len(vertices))
    return np.asarray(incidence @ face_normals)


def estimate_vertex_normals(
    vertices: np.ndarray,
    faces: np.ndarray,
    default: Tuple[float, float, float] = DEFAULT_NORMAL
) -> np.ndarray:
    """
    Compute lighting-ready unit normals per vertex.

    Vertices whose accumulated normal is (numerically) zero, including
    vertices used by no face, fall back to the default normal instead of
    normalizing a zero vector.

    Args:
        vertices: (N, 3) vertex positions
        faces: (M, 3) face indices
        default: Normal for degenerate vertices

    Returns:
        (N, 3) unit normals
    """
    accumulated = accumulate_vertex_normals(vertices, faces)
    norms = np.linalg.norm(accumulated, axis=1)
    valid = norms > 1e-12

    normals = np.empty_like(accumulated)
    normals[:] = np.asarray(default, dtype=np.float64)
    normals[valid] = accumulated[valid] / norms[valid, None]

    n_degenerate = int(np.count_nonzero(~valid))
    if n_degenerate:
        logger.debug("%d vertices fell back to the default normal", n_degenerate)

    return normals
