"""
Height to color mapping.

A gradient is a list of (position, color) stops turned into a matplotlib
colormap. Inputs outside [0, 1] are clamped to the end colors and NaN is
treated as 0.
"""

from typing import List, Sequence, Tuple, Union

import numpy as np
from matplotlib.colors import LinearSegmentedColormap, to_rgba

RGBA = Tuple[float, float, float, float]

TERRAIN_STOPS = [
    (0.0, "#1f4e79"),  # Shore water
    (0.08, "#d8c690"),  # Sand
    (0.25, "#66b266"),  # Grass
    (0.55, "#3f7f3f"),  # Forest
    (0.75, "#8c7b6b"),  # Rock
    (0.9, "#bfb7ae"),  # High rock
    (1.0, "#ffffff"),  # Snow
]


class GradientColorMapper:
    """Map a normalized scalar to an RGBA color."""

    def __init__(self, stops: Sequence[Tuple[float, object]], name: str = "landscape", n_bins: int = 256):
        if len(stops) < 2:
            raise ValueError("A gradient needs at least two stops")

        positions = [float(p) for p, _ in stops]
        if positions[0] != 0.0 or positions[-1] != 1.0:
            raise ValueError("Gradient stops must start at 0 and end at 1")
        if any(b < a for a, b in zip(positions, positions[1:])):
            raise ValueError("Gradient stop positions must be non-decreasing")

        self.stops: List[Tuple[float, RGBA]] = [(p, to_rgba(c)) for p, c in stops]
        self.cmap = LinearSegmentedColormap.from_list(name, self.stops, N=n_bins)

    @classmethod
    def terrain(cls) -> "GradientColorMapper":
        """Default water, sand, grass, rock and snow gradient."""
        return cls(TERRAIN_STOPS, name="terrain")

    def evaluate(self, t: Union[float, np.ndarray]) -> Union[RGBA, np.ndarray]:
        """
        Color at position t.

        Args:
            t: Scalar or array of gradient positions

        Returns:
            RGBA tuple for a scalar, (N, 4) float array for an array
        """
        values = np.clip(np.nan_to_num(np.asarray(t, dtype=np.float64), nan=0.0), 0.0, 1.0)
        colors = self.cmap(values)
        if values.ndim == 0:
            return tuple(float(c) for c in colors)
        return np.asarray(colors, dtype=np.float64)
