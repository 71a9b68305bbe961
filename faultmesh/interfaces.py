"""Shared interface dataclasses passed between generation stages."""
from dataclasses import dataclass
from typing import List, Optional, Tuple
import math
import numbers
import numpy as np
from numpy.typing import NDArray

from faultmesh.exceptions import IndexOutOfRangeError


@dataclass
class GridSpec:
    """Rectangular lattice parameters (GridTopology input).

    Attributes:
        div: Subdivisions per axis (>= 1)
        min_x: Lower x bound
        max_x: Upper x bound
        min_y: Lower y bound
        max_y: Upper y bound
    """
    div: int
    min_x: float = -1.0
    max_x: float = 1.0
    min_y: float = -1.0
    max_y: float = 1.0

    @property
    def n_vertices(self) -> int:
        """Vertex count (div+1)²."""
        return (self.div + 1) ** 2

    @property
    def n_faces(self) -> int:
        """Triangle count 2·div²."""
        return 2 * self.div ** 2

    @property
    def delta_x(self) -> float:
        return (self.max_x - self.min_x) / self.div

    @property
    def delta_y(self) -> float:
        return (self.max_y - self.min_y) / self.div

    def validate(self) -> List[str]:
        """Validate lattice parameters.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if isinstance(self.div, bool) or not isinstance(self.div, (int, np.integer)):
            errors.append("div must be an integer")
        elif self.div < 1:
            errors.append("div must be >= 1")

        bounds = (self.min_x, self.max_x, self.min_y, self.max_y)
        if not all(isinstance(b, numbers.Real) and not isinstance(b, bool) for b in bounds):
            errors.append("grid bounds must be numbers")
        elif not all(math.isfinite(b) for b in bounds):
            errors.append("grid bounds must be finite")
        else:
            if self.min_x >= self.max_x:
                errors.append("min_x must be < max_x")
            if self.min_y >= self.max_y:
                errors.append("min_y must be < max_y")

        return errors


@dataclass
class HeightInterval:
    """Observed height extrema over all vertices.

    Attributes:
        min_z: Lowest vertex height
        max_z: Highest vertex height
    """
    min_z: float
    max_z: float

    @property
    def length(self) -> float:
        """Band interval length |min_z| + |max_z|."""
        return abs(self.min_z) + abs(self.max_z)


@dataclass
class ColorBandThresholds:
    """Lower z bound of each elevation color band, top band first.

    Attributes:
        top_start: Start of the top (peak) band
        mid_start: Start of the mid band
        base_start: Start of the base band
        bot_start: Start of the bottom band (always min_z)
    """
    top_start: float
    mid_start: float
    base_start: float
    bot_start: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.top_start, self.mid_start, self.base_start, self.bot_start)

    def as_array(self) -> NDArray[np.float64]:
        """Return thresholds as a vec4, the layout a shader uniform expects."""
        return np.array(self.as_tuple(), dtype=np.float64)


@dataclass(frozen=True)
class Mesh:
    """Finished terrain mesh handed to the rendering collaborator.

    Fields cannot be reassigned, and freeze() makes the arrays read-only.

    Attributes:
        grid: Lattice parameters the mesh was built from
        vertices: Vertex positions (N, 3)
        normals: Unit vertex normals (N, 3)
        faces: Triangle vertex indices (F, 3)
        edges: Wireframe vertex index pairs (3F, 2)
        height_interval: Observed (min_z, max_z)
        thresholds: Elevation color band thresholds
        seed: Seed used for the fault plane draws (None if unseeded)
    """
    grid: GridSpec
    vertices: NDArray[np.float64]
    normals: NDArray[np.float64]
    faces: NDArray[np.int64]
    edges: NDArray[np.int64]
    height_interval: HeightInterval
    thresholds: ColorBandThresholds
    seed: Optional[int] = None

    def freeze(self) -> "Mesh":
        """Mark all buffers read-only and return self."""
        for arr in (self.vertices, self.normals, self.faces, self.edges):
            arr.flags.writeable = False
        return self

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        return len(self.faces)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    # Flat buffers, laid out for direct upload

    @property
    def vertex_buffer(self) -> NDArray[np.float64]:
        """Vertex positions flattened to length 3·n_vertices."""
        return self.vertices.ravel()

    @property
    def normal_buffer(self) -> NDArray[np.float64]:
        """Vertex normals flattened to length 3·n_vertices."""
        return self.normals.ravel()

    @property
    def index_buffer(self) -> NDArray[np.int64]:
        """Triangle indices flattened to length 3·n_faces."""
        return self.faces.ravel()

    @property
    def edge_buffer(self) -> NDArray[np.int64]:
        """Line-list indices flattened to length 6·n_faces."""
        return self.edges.ravel()

    # Accessors by flat index

    def get_vertex(self, i: int) -> NDArray[np.float64]:
        """Return (x, y, z) of vertex i."""
        return self.vertices[_check_index(i, self.n_vertices, "vertex")]

    def get_normal(self, i: int) -> NDArray[np.float64]:
        """Return the unit normal of vertex i."""
        return self.normals[_check_index(i, self.n_vertices, "vertex")]

    def get_face(self, f: int) -> NDArray[np.int64]:
        """Return the three vertex indices of face f."""
        return self.faces[_check_index(f, self.n_faces, "face")]

    def get_face_vertices(self, f: int) -> NDArray[np.float64]:
        """Return the (3, 3) positions of the corners of face f."""
        return self.vertices[self.get_face(f)]

    def get_face_normals(self, f: int) -> NDArray[np.float64]:
        """Return the (3, 3) vertex normals at the corners of face f."""
        return self.normals[self.get_face(f)]

    def get_edge(self, e: int) -> NDArray[np.int64]:
        """Return the vertex index pair of wireframe edge e."""
        return self.edges[_check_index(e, self.n_edges, "edge")]

    # Accessors by grid coordinate

    def vertex_index(self, row: int, col: int) -> int:
        """Flat index of the vertex at (row, col)."""
        from faultmesh.terrain.grid import vertex_index
        return vertex_index(row, col, self.grid.div)

    def get_vertex_at(self, row: int, col: int) -> NDArray[np.float64]:
        return self.vertices[self.vertex_index(row, col)]

    def get_normal_at(self, row: int, col: int) -> NDArray[np.float64]:
        return self.normals[self.vertex_index(row, col)]


def _check_index(i: int, count: int, kind: str) -> int:
    """Reject indices outside [0, count) rather than clamping or wrapping."""
    if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
        raise IndexOutOfRangeError(f"{kind} index must be an integer, got {i!r}")
    if not 0 <= i < count:
        raise IndexOutOfRangeError(f"{kind} index {i} out of range [0, {count})")
    return int(i)
