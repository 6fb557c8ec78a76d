"""
Radial island falloff.

Full weight inside three quarters of the half-size radius, a linear ramp to
zero over the last quarter, and zero beyond it. The half size uses float
division so odd resolutions fall off smoothly.
"""

import math


class IslandFilter:
    """Attenuate noise by normalized distance from the grid center."""

    RAMP = 4.0

    def falloff(self, x_index: float, z_index: float, resolution: int) -> float:
        """Weight in [0, 1] for a grid position."""
        half = resolution / 2
        cx = x_index - half
        cz = z_index - half
        r = math.sqrt(cx * cx + cz * cz) / half

        # Fall off to zero over the last quarter of the radius.
        p = (1 - r) * self.RAMP
        if p < 0:
            return 0.0
        if p >= 1:
            return 1.0
        return p

    def apply(self, x_index: float, noise_value: float, z_index: float, resolution: int) -> float:
        """Shape a noise value at (x_index, z_index)."""
        weight = self.falloff(x_index, z_index, resolution)
        if weight == 0.0:
            return 0.0
        return weight * noise_value

