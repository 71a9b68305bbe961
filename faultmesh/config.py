"""Terrain generation configuration management."""
from dataclasses import dataclass, asdict
from typing import List, Optional, Tuple, Union
from pathlib import Path
import math
import numbers
import yaml

from faultmesh.exceptions import InvalidParameterError
from faultmesh.interfaces import GridSpec


@dataclass
class TerrainConfig:
    """Configuration for fault-plane terrain generation.

    Attributes:
        div: Subdivisions per axis
        min_x: Lower x bound of the terrain
        max_x: Upper x bound of the terrain
        min_y: Lower y bound of the terrain
        max_y: Upper y bound of the terrain
        fault_iterations: Number of random fault planes
        fault_delta: Height offset applied per fault plane
        seed: Seed for the fault plane draws (None for a fresh run)
        top_fraction: Share of the height interval for the top band
        mid_fraction: Share of the height interval for the mid band
        base_fraction: Share of the height interval for the base band
    """

    # Grid
    div: int = 150
    min_x: float = -1.0
    max_x: float = 1.0
    min_y: float = -1.0
    max_y: float = 1.0

    # Fault partitioning
    fault_iterations: int = 1000
    fault_delta: float = 0.005

    # Random seed
    seed: Optional[int] = 42

    # Color banding
    top_fraction: float = 0.2
    mid_fraction: float = 0.3
    base_fraction: float = 0.3

    @property
    def grid(self) -> GridSpec:
        """Lattice parameters for this configuration."""
        return GridSpec(
            div=self.div,
            min_x=self.min_x,
            max_x=self.max_x,
            min_y=self.min_y,
            max_y=self.max_y,
        )

    @property
    def band_fractions(self) -> Tuple[float, float, float]:
        return (self.top_fraction, self.mid_fraction, self.base_fraction)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "TerrainConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        with open(path, 'w') as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = self.grid.validate()

        if isinstance(self.fault_iterations, bool) or not isinstance(self.fault_iterations, numbers.Integral):
            errors.append("fault_iterations must be an integer")
        elif self.fault_iterations < 0:
            errors.append("fault_iterations must be >= 0")

        if isinstance(self.fault_delta, bool) or not isinstance(self.fault_delta, numbers.Real):
            errors.append("fault_delta must be a number")
        elif not math.isfinite(self.fault_delta):
            errors.append("fault_delta must be finite")

        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral):
                errors.append("seed must be an integer or None")
            elif self.seed < 0:
                errors.append("seed must be >= 0")

        fractions = self.band_fractions
        if any(f < 0 for f in fractions) or sum(fractions) > 1:
            errors.append("band fractions must be non-negative and sum to at most 1")

        return errors

    def raise_if_invalid(self) -> None:
        """Raise InvalidParameterError listing every validation error."""
        errors = self.validate()
        if errors:
            raise InvalidParameterError("; ".join(errors))
