"""
Multi-octave fractal noise.

Frequency starts at the lacunarity value and halves after every octave;
lacunarity does not act as a per-octave growth factor. Each octave is
weighted by gain and the sum is normalized by the total weight, so the
result stays in [0, 1] whenever the primitive does.
"""

from typing import Optional, Sequence

from .errors import InvalidParameterError
from .noise_source import NoiseSource


class FractalNoiseEvaluator:
    """Combine octaves of a NoiseSource into one normalized scalar."""

    def __init__(self, noise_source: Optional[NoiseSource] = None):
        self.noise_source = noise_source if noise_source is not None else NoiseSource()

    def evaluate(
        self,
        coords: Sequence[float],
        gain: float,
        lacunarity: float,
        octaves: int,
        scale: float,
        shift: Sequence[float],
        seed: int,
    ) -> float:
        """
        Evaluate fractal noise at a single coordinate.

        The noise source is reseeded on every call, so every coordinate sees
        the same jitter sequence for a given seed.

        Args:
            coords: (x, y) sample coordinate
            gain: Per-octave amplitude
            lacunarity: Initial frequency multiplier
            octaves: Number of octaves to sum
            scale: Coordinate scale
            shift: (x, y) offset added after scaling
            seed: Jitter generator state

        Returns:
            Weighted average of the octave samples
        """
        if octaves < 1:
            raise InvalidParameterError("octaves", octaves, "at least one octave is required")
        if gain <= 0:
            raise InvalidParameterError("gain", gain, "must be greater than zero")

        source = self.noise_source
        source.seed(seed)

        total = 0.0
        max_value = 0.0
        freq = lacunarity
        for _ in range(octaves):
            jx, jy = source.jitter()
            x = coords[0] * freq * scale + jx + shift[0]
            y = coords[1] * freq * scale + jy + shift[1]

            total += source.noise2d(x, y) * gain
            freq /= 2
            max_value += gain

        return total / max_value
