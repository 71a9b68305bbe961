"""Tests for vertex normal estimation."""
import pytest
import numpy as np
from faultmesh.interfaces import GridSpec
from faultmesh.terrain.grid import build_vertices, build_faces
from faultmesh.terrain.fault import make_rng, partition_heights
from faultmesh.terrain.normals import (
    DEFAULT_NORMAL,
    compute_face_normals,
    compute_face_areas,
    incidence_matrix,
    vertex_face_counts,
    accumulate_vertex_normals,
    estimate_vertex_normals,
)


UNIT_FACES = np.array([[0, 1, 2], [1, 3, 2]])


class TestFaceNormals:
    """Tests for per-face cross products."""

    def test_flat_face_points_up(self):
        """Counter-clockwise face in the xy plane should point along +z."""
        vertices = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
        normals = compute_face_normals(vertices, np.array([[0, 1, 2]]))
        assert np.allclose(normals[0], [0, 0, 1])

    def test_cross_product_not_dot(self, tilted_vertices):
        """Face normal is (v2-v1) × (v3-v1), not a broadcast dot product."""
        normals = compute_face_normals(tilted_vertices, UNIT_FACES)
        assert np.allclose(normals, [[-1, 0, 1], [-1, 0, 1]])

    def test_unnormalized_length_is_twice_area(self):
        vertices = np.array([[0.0, 0.0, 0.0], [3.0, 0.0, 0.0], [0.0, 2.0, 0.0]])
        faces = np.array([[0, 1, 2]])
        assert np.linalg.norm(compute_face_normals(vertices, faces)[0]) == pytest.approx(6.0)
        assert compute_face_areas(vertices, faces)[0] == pytest.approx(3.0)

    def test_normalized(self, tilted_vertices):
        normals = compute_face_normals(tilted_vertices, UNIT_FACES, normalize=True)
        assert np.allclose(np.linalg.norm(normals, axis=1), 1.0)

    def test_normalized_degenerate_face(self):
        """A collinear face should normalize to zero rather than NaN."""
        vertices = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
        normals = compute_face_normals(vertices, np.array([[0, 1, 2]]), normalize=True)
        assert np.array_equal(normals[0], [0, 0, 0])


class TestIncidence:
    """Tests for vertex/face incidence."""

    def test_incidence_matrix(self):
        m = incidence_matrix(UNIT_FACES, 4).toarray()
        assert m.tolist() == [[1, 0], [1, 1], [1, 1], [0, 1]]

    def test_face_counts_grid(self):
        """Corners touch 1 or 2 faces, interior vertices 6."""
        div = 3
        faces = build_faces(GridSpec(div=div))
        counts = vertex_face_counts(faces, (div + 1) ** 2)
        assert counts.min() >= 1
        assert counts[0] == 1
        assert counts[div] == 2
        assert counts[(div + 1) + 1] == 6
        assert counts.sum() == 3 * len(faces)

    def test_isolated_vertex_counted(self):
        counts = vertex_face_counts(UNIT_FACES, 5)
        assert counts[4] == 0


class TestVertexNormals:
    """Tests for accumulated vertex normals."""

    def test_each_face_counted_once(self, tilted_vertices):
        """Vertex sums should hold one copy of each incident face normal."""
        acc = accumulate_vertex_normals(tilted_vertices, UNIT_FACES)
        face_n = compute_face_normals(tilted_vertices, UNIT_FACES)
        assert np.allclose(acc[0], face_n[0])
        assert np.allclose(acc[1], face_n[0] + face_n[1])
        assert np.allclose(acc[2], face_n[0] + face_n[1])
        assert np.allclose(acc[3], face_n[1])

    def test_accumulation_matches_loop(self):
        """Sparse accumulation should match a per-face loop."""
        spec = GridSpec(div=5)
        vertices = build_vertices(spec)
        faces = build_faces(spec)
        partition_heights(vertices, spec, 50, 0.05, make_rng(9))

        expected = np.zeros_like(vertices)
        for face in faces:
            v1, v2, v3 = vertices[face]
            n = np.cross(v2 - v1, v3 - v1)
            for v in face:
                expected[v] += n

        assert np.allclose(accumulate_vertex_normals(vertices, faces), expected)

    def test_plane_normals(self, tilted_vertices):
        """Every vertex on the plane z = x should share its normal."""
        normals = estimate_vertex_normals(tilted_vertices, UNIT_FACES)
        assert np.allclose(normals, np.array([[-1, 0, 1]] * 4) / np.sqrt(2))

    def test_flat_grid_points_up(self):
        spec = GridSpec(div=4)
        normals = estimate_vertex_normals(build_vertices(spec), build_faces(spec))
        assert np.allclose(normals, [0, 0, 1])

    def test_unit_length(self):
        """Normals on rough terrain should have length 1 ± 1e-5."""
        spec = GridSpec(div=12)
        vertices = build_vertices(spec)
        faces = build_faces(spec)
        partition_heights(vertices, spec, 200, 0.02, make_rng(12))
        normals = estimate_vertex_normals(vertices, faces)
        assert np.all(np.abs(np.linalg.norm(normals, axis=1) - 1.0) < 1e-5)

    def test_untouched_vertex_default(self, tilted_vertices):
        """A vertex with no faces should keep the default normal."""
        vertices = np.vstack([tilted_vertices, [[5.0, 5.0, 5.0]]])
        normals = estimate_vertex_normals(vertices, UNIT_FACES)
        assert np.array_equal(normals[4], DEFAULT_NORMAL)
        assert np.all(np.isfinite(normals))

    def test_custom_default(self):
        """Degenerate sums should use the provided default."""
        vertices = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
        normals = estimate_vertex_normals(vertices, np.array([[0, 1, 2]]), default=(1.0, 0.0, 0.0))
        assert np.array_equal(normals, [[1, 0, 0]] * 3)
