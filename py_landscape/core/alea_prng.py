"""
Python implementation of the Alea PRNG.

Based on Johannes Baagøe's Alea algorithm. Used as the seedable uniform
generator behind the noise jitter so a given integer state always yields
the same sequence.
"""


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


def _mash_state(args):
    """Run the Mash hash over the seed arguments and return (s0, s1, s2)."""
    mash_n = 0xEFC8249D  # 4022871197

    def mash(data):
        nonlocal mash_n
        data = str(data)
        for char in data:
            mash_n = mash_n + ord(char)
            h = 0.02519603282416938 * mash_n
            mash_n = _uint32(h)
            h -= mash_n
            h *= mash_n
            mash_n = _uint32(h)
            h -= mash_n
            mash_n += h * 0x100000000  # 2^32
        return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

    s0 = mash(" ")
    s1 = mash(" ")
    s2 = mash(" ")

    for arg in args:
        s0 -= mash(arg)
        if s0 < 0:
            s0 += 1
        s1 -= mash(arg)
        if s1 < 0:
            s1 += 1
        s2 -= mash(arg)
        if s2 < 0:
            s2 += 1

    return s0, s1, s2


class AleaPRNG:
    """
    Alea PRNG.

    Can be reseeded in place, which keeps the call counter running so callers
    can observe how many values were consumed across reseeds.
    """

    def __init__(self, seed=0):
        """Initialize with seed string or number."""
        self.call_count = 0
        self.seed(seed)

    def seed(self, seed):
        """Reset the generator state from a seed string, number or iterable."""
        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        self.s0, self.s1, self.s2 = _mash_state(args)
        self.c = 1

    def random(self):
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def uniform(self, low=0.0, high=1.0):
        """Uniform float in [low, high)."""
        return low + (high - low) * self.random()
