"""
Fault-Plane Height Synthesis

Repeatedly partitions the terrain with a random vertical cutting plane,
raising every vertex on one side and lowering every vertex on the other.
Superposing many such faults produces fractal-like relief.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numba import jit, prange

from faultmesh.exceptions import InvalidParameterError
from faultmesh.interfaces import GridSpec

logger = logging.getLogger(__name__)


@dataclass
class FaultPlanes:
    """Random fault planes, one per iteration.

    Attributes:
        points: Point on each plane (N, 2), z is always 0
        normals: Horizontal unit plane normals (N, 2)
        angles: Normal angles in radians, in [0, 2π) (N,)
    """
    points: np.ndarray
    normals: np.ndarray
    angles: np.ndarray

    @property
    def n_planes(self) -> int:
        return len(self.angles)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator owned by a single generation run."""
    return np.random.default_rng(seed)


def draw_fault_planes(
    rng: np.random.Generator,
    spec: GridSpec,
    n_iterations: int
) -> FaultPlanes:
    """Draw fault planes over the grid bounds.

    Three uniforms are consumed per iteration, in the order px, py, θ,
    so iteration k always sees the same draws regardless of batching.

    Args:
        rng: Seeded generator
        spec: Lattice parameters (bounds for the plane point)
        n_iterations: Number of planes to draw

    Returns:
        FaultPlanes with n_iterations entries
    """
    u = rng.random((n_iterations, 3))

    px = u[:, 0] * (spec.max_x - spec.min_x) + spec.min_x
    py = u[:, 1] * (spec.max_y - spec.min_y) + spec.min_y
    angles = u[:, 2] * (2 * np.pi)

    return FaultPlanes(
        points=np.stack([px, py], axis=1),
        normals=np.stack([np.cos(angles), np.sin(angles)], axis=1),
        angles=angles,
    )


@jit(nopython=True, parallel=True, cache=True)
def _apply_faults_core(
    xy: np.ndarray,
    heights: np.ndarray,
    points: np.ndarray,
    normals: np.ndarray,
    delta: float
) -> None:
    """Core fault loop (Numba-accelerated).

    Iterations run in sequence; the sign test over vertices within one
    iteration is independent per vertex.
    """
    n_vertices = xy.shape[0]

    for k in range(points.shape[0]):
        px = points[k, 0]
        py = points[k, 1]
        nx = normals[k, 0]
        ny = normals[k, 1]

        for v in prange(n_vertices):
            s = (xy[v, 0] - px) * nx + (xy[v, 1] - py) * ny
            # Vertices on the plane are lowered
            if s > 0:
                heights[v] += delta
            else:
                heights[v] -= delta


def apply_fault_planes(
    vertices: np.ndarray,
    planes: FaultPlanes,
    delta: float
) -> np.ndarray:
    """Raise or lower vertex heights across each fault plane in turn.

    Args:
        vertices: (N, 3) positions, z modified in place
        planes: Fault planes to apply, in order
        delta: Height offset per plane

    Returns:
        The same vertices array
    """
    if planes.n_planes == 0:
        return vertices

    xy = np.ascontiguousarray(vertices[:, :2], dtype=np.float64)
    heights = np.ascontiguousarray(vertices[:, 2], dtype=np.float64)

    _apply_faults_core(
        xy, heights,
        np.ascontiguousarray(planes.points, dtype=np.float64),
        np.ascontiguousarray(planes.normals, dtype=np.float64),
        float(delta),
    )
    vertices[:, 2] = heights

    return vertices


def partition_heights(
    vertices: np.ndarray,
    spec: GridSpec,
    n_iterations: int,
    delta: float,
    rng: np.random.Generator
) -> FaultPlanes:
    """Perturb vertex heights by n_iterations random fault planes.

    Args:
        vertices: (N, 3) positions, z modified in place
        spec: Lattice parameters
        n_iterations: Number of fault planes (0 is a no-op)
        delta: Amount to raise (and lower) the partitioned vertices
        rng: Generator owned by the caller

    Returns:
        The planes that were applied
    """
    if n_iterations < 0:
        raise InvalidParameterError("fault_iterations must be >= 0")

    planes = draw_fault_planes(rng, spec, n_iterations)
    apply_fault_planes(vertices, planes, delta)
    logger.debug("Applied %d fault planes with delta=%g", n_iterations, delta)

    return planes
