"""
Elevation Color Banding

Splits the observed height range into four bands (top, mid, base, bot)
for a downstream per-fragment color selector. Everything here is pure;
no rendering calls.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from faultmesh.exceptions import InvalidParameterError
from faultmesh.interfaces import ColorBandThresholds, HeightInterval

# Band indices returned by classify_heights
BAND_TOP = 0
BAND_MID = 1
BAND_BASE = 2
BAND_BOT = 3

RGB = Tuple[float, float, float]


@dataclass
class ColorPalette:
    """Color of each elevation band, as RGB in [0, 1]."""
    top: RGB = (255.0 / 255.0, 250.0 / 255.0, 250.0 / 255.0)  # snow
    mid: RGB = (135.0 / 255.0, 67.0 / 255.0, 23.0 / 255.0)    # earth
    base: RGB = (44.0 / 255.0, 176.0 / 255.0, 55.0 / 255.0)   # vegetation
    bot: RGB = (0.0 / 255.0, 151.0 / 255.0, 241.0 / 255.0)    # ocean

    def as_array(self) -> np.ndarray:
        """(4, 3) colors indexed by band."""
        return np.array([self.top, self.mid, self.base, self.bot], dtype=np.float64)


def compute_height_interval(vertices: np.ndarray) -> HeightInterval:
    """Scan all vertex heights for their extrema."""
    z = vertices[:, 2]
    return HeightInterval(min_z=float(np.min(z)), max_z=float(np.max(z)))


def compute_band_thresholds(
    interval: HeightInterval,
    top_fraction: float = 0.2,
    mid_fraction: float = 0.3,
    base_fraction: float = 0.3
) -> ColorBandThresholds:
    """
    Compute the lower bound of each color band.

    With L = |min_z| + |max_z|, the top band takes the highest 20% of L,
    mid and base the next 30% each, and bot the rest down to min_z.
    Bounds that would fall below min_z (only possible when all heights
    share a sign) are held at min_z.

    Args:
        interval: Observed height extrema
        top_fraction: Share of L for the top band
        mid_fraction: Share of L for the mid band
        base_fraction: Share of L for the base band

    Returns:
        ColorBandThresholds with top >= mid >= base >= bot == min_z
    """
    fractions = (top_fraction, mid_fraction, base_fraction)
    if any(f < 0 for f in fractions) or sum(fractions) > 1:
        raise InvalidParameterError(
            "band fractions must be non-negative and sum to at most 1"
        )

    min_z = interval.min_z
    length = interval.length

    top_start = interval.max_z - top_fraction * length
    mid_start = top_start - mid_fraction * length
    base_start = mid_start - base_fraction * length

    return ColorBandThresholds(
        top_start=max(top_start, min_z),
        mid_start=max(mid_start, min_z),
        base_start=max(base_start, min_z),
        bot_start=min_z,
    )


def classify_heights(z: np.ndarray, thresholds: ColorBandThresholds) -> np.ndarray:
    """
    Assign each height to a band.

    Args:
        z: Heights (any shape)
        thresholds: Band thresholds

    Returns:
        int array of BAND_* indices, same shape as z
    """
    z = np.asarray(z, dtype=np.float64)
    return np.select(
        [z >= thresholds.top_start,
         z >= thresholds.mid_start,
         z >= thresholds.base_start],
        [BAND_TOP, BAND_MID, BAND_BASE],
        default=BAND_BOT,
    )


def band_colors(
    z: np.ndarray,
    thresholds: ColorBandThresholds,
    palette: Optional[ColorPalette] = None
) -> np.ndarray:
    """Per-height RGB colors, shape z.shape + (3,)."""
    palette = palette or ColorPalette()
    return palette.as_array()[classify_heights(z, thresholds)]
