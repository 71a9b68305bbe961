"""Terrain mesh generation stages."""
from .grid import (
    validate_grid,
    vertex_index,
    vertex_row_col,
    build_vertices,
    build_faces,
    build_grid,
)
from .fault import (
    FaultPlanes,
    make_rng,
    draw_fault_planes,
    apply_fault_planes,
    partition_heights,
)
from .normals import (
    DEFAULT_NORMAL,
    compute_face_normals,
    compute_face_areas,
    incidence_matrix,
    vertex_face_counts,
    accumulate_vertex_normals,
    estimate_vertex_normals,
)
from .edges import extract_edges, unique_edges
from .banding import (
    ColorPalette,
    compute_height_interval,
    compute_band_thresholds,
    classify_heights,
    band_colors,
)

__all__ = [
    'validate_grid',
    'vertex_index',
    'vertex_row_col',
    'build_vertices',
    'build_faces',
    'build_grid',
    'FaultPlanes',
    'make_rng',
    'draw_fault_planes',
    'apply_fault_planes',
    'partition_heights',
    'DEFAULT_NORMAL',
    'compute_face_normals',
    'compute_face_areas',
    'incidence_matrix',
    'vertex_face_counts',
    'accumulate_vertex_normals',
    'estimate_vertex_normals',
    'extract_edges',
    'unique_edges',
    'ColorPalette',
    'compute_height_interval',
    'compute_band_thresholds',
    'classify_heights',
    'band_colors',
]
