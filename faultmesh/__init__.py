"""Procedural fault-plane terrain mesh generation."""
from .config import TerrainConfig
from .exceptions import FaultMeshError, IndexOutOfRangeError, InvalidParameterError
from .interfaces import ColorBandThresholds, GridSpec, HeightInterval, Mesh
from .pipeline import TerrainGenerator, generate, generate_from_config

__version__ = "0.1.0"

__all__ = [
    "TerrainConfig",
    "GridSpec",
    "HeightInterval",
    "ColorBandThresholds",
    "Mesh",
    "TerrainGenerator",
    "generate",
    "generate_from_config",
    "FaultMeshError",
    "InvalidParameterError",
    "IndexOutOfRangeError",
]
