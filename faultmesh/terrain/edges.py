"""Wireframe line-list derivation from the triangle list."""
import numpy as np


def extract_edges(faces: np.ndarray) -> np.ndarray:
    """
    Emit the three edges of every triangle, in triangle order.

    Edges shared by neighbouring triangles appear once per triangle;
    the list is not deduplicated.

    Args:
        faces: (M, 3) face indices

    Returns:
        (3M, 2) vertex index pairs: (a, b), (b, c), (c, a) per face
    """
    faces = np.asarray(faces)
    return faces[:, [0, 1, 1, 2, 2, 0]].reshape(-1, 2)


def unique_edges(edges: np.ndarray) -> np.ndarray:
    """Distinct undirected edges as sorted (low, high) pairs."""
    if len(edges) == 0:
        return np.empty((0, 2), dtype=np.int64)
    return np.unique(np.sort(edges, axis=1), axis=0)
