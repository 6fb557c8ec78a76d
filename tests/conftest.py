"""Shared test doubles for terrain generation tests."""

import numpy as np
import pytest


class RecordingNoiseSource:
    """NoiseSource stand-in with fixed jitter and a scripted primitive."""

    def __init__(self, noise_value=0.5, jitter=(0.0, 0.0)):
        self.noise_value = noise_value
        self.fixed_jitter = jitter
        self.seeds = []
        self.jitter_calls = 0
        self.samples = []

    def seed(self, state):
        self.seeds.append(state)

    def uniform(self):
        return 0.0

    def jitter(self):
        self.jitter_calls += 1
        return self.fixed_jitter

    def noise2d(self, x, y):
        self.samples.append((x, y))
        if callable(self.noise_value):
            return self.noise_value(x, y)
        return self.noise_value


class ConstantEvaluator:
    """FractalNoiseEvaluator stand-in returning a fixed value."""

    def __init__(self, value=0.5):
        self.value = value
        self.calls = []

    def evaluate(self, coords, gain, lacunarity, octaves, scale, shift, seed):
        self.calls.append(tuple(coords))
        return self.value


class RecordingGradient:
    """GradientColorMapper stand-in that records the positions it is given."""

    def __init__(self):
        self.positions = None

    def evaluate(self, t):
        self.positions = np.array(t, dtype=np.float64)
        return np.zeros((len(self.positions), 4))


@pytest.fixture
def recording_source():
    return RecordingNoiseSource()


@pytest.fixture
def constant_evaluator():
    return ConstantEvaluator(0.5)
