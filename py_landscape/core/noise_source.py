"""
Noise source for fractal terrain synthesis.

Pairs a seedable uniform generator (Alea) with a deterministic 2D noise
primitive. The generator supplies per-octave coordinate jitter; the
primitive is a pure function of its two coordinates.
"""

from typing import Callable, Optional, Tuple

from opensimplex import OpenSimplex

from .alea_prng import AleaPRNG

Noise2D = Callable[[float, float], float]

# Fixed seed for the noise primitive itself. Terrain variation comes from the
# jitter generator, not from reseeding the primitive.
PRIMITIVE_SEED = 0


class OpenSimplexNoise2D:
    """
    OpenSimplex 2D noise remapped to [0, 1].

    OpenSimplex returns values in [-1, 1]; the terrain pipeline expects a
    Perlin-style primitive in [0, 1], so the output is shifted, halved and
    clamped.
    """

    def __init__(self, seed: int = PRIMITIVE_SEED):
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed)

    def __call__(self, x: float, y: float) -> float:
        value = (self._simplex.noise2(x, y) + 1.0) * 0.5
        return min(1.0, max(0.0, value))


class NoiseSource:
    """
    Seedable jitter generator plus a 2D noise primitive.

    Example:
        source = NoiseSource()
        source.seed(42)
        jx, jy = source.jitter()
        value = source.noise2d(1.5 + jx, 2.5 + jy)
    """

    def __init__(
        self,
        noise2d: Optional[Noise2D] = None,
        prng: Optional[AleaPRNG] = None,
    ):
        self._noise2d = noise2d if noise2d is not None else OpenSimplexNoise2D()
        self._prng = prng if prng is not None else AleaPRNG(0)

    @property
    def draws(self) -> int:
        """Number of uniform values consumed since construction."""
        return self._prng.call_count

    def seed(self, state: int) -> None:
        """Reset the jitter generator deterministically."""
        self._prng.seed(str(int(state)))

    def uniform(self) -> float:
        """Next uniform value in [0, 1)."""
        return self._prng.random()

    def jitter(self) -> Tuple[float, float]:
        """Draw the (x, y) jitter pair for one octave."""
        jx = self.uniform()
        jy = self.uniform()
        return jx, jy

    def noise2d(self, x: float, y: float) -> float:
        return self._noise2d(x, y)
