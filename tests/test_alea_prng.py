"""Tests for the Alea PRNG."""

import pytest
from py_landscape.core.alea_prng import AleaPRNG


class TestAleaPRNG:
    """Test seeding and sequence behaviour."""

    def test_same_seed_same_sequence(self):
        """Two generators with one seed produce the same values."""
        a = AleaPRNG("42")
        b = AleaPRNG("42")

        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seeds_differ(self):
        """Different seeds produce different sequences."""
        a = AleaPRNG("1")
        b = AleaPRNG("2")

        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_values_in_unit_interval(self):
        """All values fall in [0, 1)."""
        prng = AleaPRNG("range")
        values = [prng.random() for _ in range(1000)]

        assert min(values) >= 0.0
        assert max(values) < 1.0

    def test_reseed_restarts_sequence(self):
        """Reseeding in place restarts the sequence from the beginning."""
        prng = AleaPRNG("7")
        first = [prng.random() for _ in range(4)]

        prng.seed("7")
        again = [prng.random() for _ in range(4)]

        assert first == again

    def test_call_count_survives_reseed(self):
        """The call counter keeps counting across reseeds."""
        prng = AleaPRNG("7")
        prng.random()
        prng.random()
        prng.seed("8")
        prng.random()

        assert prng.call_count == 3

    def test_uniform_range(self):
        """uniform() scales into [low, high)."""
        prng = AleaPRNG("u")
        for _ in range(100):
            value = prng.uniform(5.0, 6.0)
            assert 5.0 <= value < 6.0
