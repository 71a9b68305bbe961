"""End-to-end terrain generation pipeline."""
import logging
from dataclasses import replace
from typing import Optional

from faultmesh.config import TerrainConfig
from faultmesh.interfaces import Mesh
from faultmesh.terrain.grid import build_grid
from faultmesh.terrain.fault import make_rng, partition_heights
from faultmesh.terrain.normals import estimate_vertex_normals
from faultmesh.terrain.edges import extract_edges
from faultmesh.terrain.banding import compute_height_interval, compute_band_thresholds

logger = logging.getLogger(__name__)


def generate_from_config(config: TerrainConfig) -> Mesh:
    """
    Execute the complete generation pipeline.

    Stages run strictly in sequence: grid, fault partitioning, normals,
    wireframe edges, height interval and band thresholds. Parameters are
    validated before any buffer is allocated.

    Args:
        config: Terrain configuration

    Returns:
        Immutable Mesh
    """
    config.raise_if_invalid()
    spec = config.grid

    logger.info(
        "Terrain: generating div=%d with %d fault planes (seed=%s)",
        spec.div, config.fault_iterations, config.seed
    )

    vertices, faces = build_grid(spec)

    rng = make_rng(config.seed)
    partition_heights(
        vertices, spec, config.fault_iterations, config.fault_delta, rng
    )

    normals = estimate_vertex_normals(vertices, faces)
    edges = extract_edges(faces)

    interval = compute_height_interval(vertices)
    thresholds = compute_band_thresholds(interval, *config.band_fractions)

    logger.info(
        "Terrain: %d vertices, %d triangles, z in [%g, %g]",
        len(vertices), len(faces), interval.min_z, interval.max_z
    )

    return Mesh(
        grid=spec,
        vertices=vertices,
        normals=normals,
        faces=faces,
        edges=edges,
        height_interval=interval,
        thresholds=thresholds,
        seed=config.seed,
    ).freeze()


def generate(
    div: int,
    min_x: float,
    max_x: float,
    min_y: float,
    max_y: float,
    fault_iterations: int = 1000,
    fault_delta: float = 0.005,
    seed: Optional[int] = None
) -> Mesh:
    """
    Generate a fault-plane terrain mesh.

    Args:
        div: Subdivisions per axis
        min_x: Lower x bound
        max_x: Upper x bound
        min_y: Lower y bound
        max_y: Upper y bound
        fault_iterations: Number of random fault planes
        fault_delta: Height offset per fault plane
        seed: Seed for the fault plane draws; None is not reproducible

    Returns:
        Immutable Mesh
    """
    config = TerrainConfig(
        div=div,
        min_x=min_x,
        max_x=max_x,
        min_y=min_y,
        max_y=max_y,
        fault_iterations=fault_iterations,
        fault_delta=fault_delta,
        seed=seed,
    )
    return generate_from_config(config)


class TerrainGenerator:
    """Generates meshes from a fixed configuration.

    Example:
        >>> generator = TerrainGenerator(TerrainConfig(div=64))
        >>> mesh = generator.generate()
        >>> other = generator.generate(seed=7)
    """

    def __init__(self, config: Optional[TerrainConfig] = None):
        self.config = config or TerrainConfig()
        self.config.raise_if_invalid()
        self.last_mesh: Optional[Mesh] = None

    def generate(self, seed: Optional[int] = None) -> Mesh:
        """Generate a mesh, overriding the configured seed if one is given."""
        config = self.config
        if seed is not None:
            config = replace(self.config, seed=seed)

        self.last_mesh = generate_from_config(config)
        return self.last_mesh
