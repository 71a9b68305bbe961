"""Shared pytest fixtures for all test modules."""
import pytest
import numpy as np

from faultmesh import TerrainConfig, GridSpec, generate


# === Configuration Fixtures ===

@pytest.fixture
def default_config():
    """Stock configuration (div=150, 1000 fault planes)."""
    return TerrainConfig()


@pytest.fixture
def test_config():
    """Reduced config for faster tests."""
    return TerrainConfig(div=12, fault_iterations=80, seed=7)


# === Grid Fixtures ===

@pytest.fixture
def unit_spec():
    """Single-cell grid over [-1, 1]²."""
    return GridSpec(div=1, min_x=-1.0, max_x=1.0, min_y=-1.0, max_y=1.0)


@pytest.fixture
def small_spec():
    """Asymmetric 3x3-cell grid."""
    return GridSpec(div=3, min_x=0.0, max_x=3.0, min_y=-2.0, max_y=4.0)


# === Mesh Fixtures ===

@pytest.fixture
def flat_mesh():
    """Single-cell mesh with no fault planes applied."""
    return generate(1, -1.0, 1.0, -1.0, 1.0, fault_iterations=0, fault_delta=0.01, seed=0)


@pytest.fixture
def rough_mesh():
    """Small mesh with enough fault planes for visible relief."""
    return generate(10, -1.0, 1.0, -1.0, 1.0, fault_iterations=120, fault_delta=0.01, seed=3)


@pytest.fixture
def tilted_vertices():
    """2x2 lattice on the plane z = x."""
    xs, ys = np.meshgrid([0.0, 1.0], [0.0, 1.0])
    return np.stack([xs.ravel(), ys.ravel(), xs.ravel()], axis=1)
