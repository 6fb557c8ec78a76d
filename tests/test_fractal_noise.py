"""Tests for multi-octave fractal noise."""

import pytest
from conftest import RecordingNoiseSource
from py_landscape.core.errors import InvalidParameterError
from py_landscape.core.fractal_noise import FractalNoiseEvaluator
from py_landscape.core.noise_source import NoiseSource


def evaluate(evaluator, coords=(3.0, 4.0), gain=0.5, lacunarity=2.0, octaves=4, scale=1.0,
             shift=(0.0, 0.0), seed=42):
    return evaluator.evaluate(coords, gain, lacunarity, octaves, scale, shift, seed)


class TestFractalNoiseEvaluator:
    """Test octave accumulation and normalization."""

    def test_reseeds_once_per_call(self, recording_source):
        """The noise source is seeded with the given state on every call."""
        evaluator = FractalNoiseEvaluator(recording_source)

        evaluate(evaluator, seed=11)
        evaluate(evaluator, seed=11)

        assert recording_source.seeds == [11, 11]

    @pytest.mark.parametrize("octaves", [1, 3, 8])
    def test_one_jitter_draw_per_octave(self, recording_source, octaves):
        """Each octave consumes exactly one jitter pair."""
        evaluator = FractalNoiseEvaluator(recording_source)

        evaluate(evaluator, octaves=octaves)

        assert recording_source.jitter_calls == octaves
        assert len(recording_source.samples) == octaves

    def test_frequency_halves_each_octave(self, recording_source):
        """Frequency starts at lacunarity and halves after every octave."""
        evaluator = FractalNoiseEvaluator(recording_source)

        evaluate(evaluator, coords=(1.0, 2.0), lacunarity=3.0, octaves=4, scale=1.0)

        xs = [x for x, _ in recording_source.samples]
        ys = [y for _, y in recording_source.samples]
        assert xs == pytest.approx([3.0, 1.5, 0.75, 0.375])
        assert ys == pytest.approx([6.0, 3.0, 1.5, 0.75])

    def test_sample_coordinates_include_scale_jitter_and_shift(self):
        """x = cx * freq * scale + jx + shift.x (likewise for y)."""
        source = RecordingNoiseSource(jitter=(0.25, 0.75))
        evaluator = FractalNoiseEvaluator(source)

        evaluate(evaluator, coords=(2.0, 5.0), lacunarity=2.0, octaves=1, scale=3.0, shift=(10.0, -1.0))

        assert source.samples == [pytest.approx((2.0 * 2.0 * 3.0 + 0.25 + 10.0, 5.0 * 2.0 * 3.0 + 0.75 - 1.0))]

    @pytest.mark.parametrize("gain", [0.1, 0.5, 1.0])
    def test_constant_noise_normalizes_to_itself(self, gain):
        """With a constant primitive the weighted average is that constant."""
        evaluator = FractalNoiseEvaluator(RecordingNoiseSource(noise_value=0.7))

        assert evaluate(evaluator, gain=gain, octaves=5) == pytest.approx(0.7)

    def test_output_within_unit_interval(self):
        """Real noise stays within [0, 1] after normalization."""
        evaluator = FractalNoiseEvaluator(NoiseSource())

        for cx in range(0, 20, 3):
            for cy in range(0, 20, 3):
                value = evaluate(evaluator, coords=(cx, cy), octaves=6, scale=5.0)
                assert 0.0 <= value <= 1.0

    def test_deterministic_for_seed(self):
        """Same inputs and seed give the same value, even from fresh sources."""
        a = evaluate(FractalNoiseEvaluator(NoiseSource()), seed=5)
        b = evaluate(FractalNoiseEvaluator(NoiseSource()), seed=5)

        assert a == b

    def test_same_jitter_for_every_coordinate(self):
        """Reseeding per call gives every coordinate the same jitter sequence."""
        samples = []
        source = NoiseSource(noise2d=lambda x, y: samples.append((x, y)) or 0.5)
        evaluator = FractalNoiseEvaluator(source)

        evaluate(evaluator, coords=(0.0, 0.0), lacunarity=2.0, octaves=3, scale=1.0)
        origin_jitter = list(samples)
        samples.clear()

        evaluate(evaluator, coords=(5.0, 9.0), lacunarity=2.0, octaves=3, scale=1.0)
        freqs = [2.0, 1.0, 0.5]
        offset_jitter = [(x - 5.0 * f, y - 9.0 * f) for (x, y), f in zip(samples, freqs)]

        assert offset_jitter == [pytest.approx(j) for j in origin_jitter]

    def test_zero_octaves_rejected(self, recording_source):
        evaluator = FractalNoiseEvaluator(recording_source)

        with pytest.raises(InvalidParameterError) as exc_info:
            evaluate(evaluator, octaves=0)

        assert exc_info.value.field == "octaves"
        assert recording_source.seeds == []

    def test_zero_gain_rejected(self, recording_source):
        evaluator = FractalNoiseEvaluator(recording_source)

        with pytest.raises(InvalidParameterError) as exc_info:
            evaluate(evaluator, gain=0.0)

        assert exc_info.value.field == "gain"
