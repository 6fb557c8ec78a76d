"""
Named terrain parameter presets.

The default preset carries the landscape component's inspector
defaults. The others are tuned starting points for common island shapes.
"""

from typing import Dict, List

from ..core.terrain_mesh import TerrainParameters

PRESETS: Dict[str, TerrainParameters] = {
    "default": TerrainParameters(),
    "small_island": TerrainParameters(
        gain=0.6,
        lacunarity=1.5,
        octaves=3,
        scale=4.0,
        seed=7,
        resolution=48,
        world_length=96.0,
        max_height=20.0,
    ),
    "rugged": TerrainParameters(
        gain=0.9,
        lacunarity=3.0,
        octaves=8,
        scale=6.0,
        seed=1337,
        resolution=128,
        max_height=80.0,
    ),
    "gentle": TerrainParameters(
        gain=0.3,
        lacunarity=1.0,
        octaves=2,
        scale=2.0,
        seed=3,
        resolution=96,
        max_height=25.0,
    ),
    "archipelago": TerrainParameters(
        gain=0.7,
        lacunarity=2.5,
        octaves=5,
        scale=9.0,
        shift=(13.5, 4.25),
        seed=2024,
        resolution=160,
        world_length=320.0,
        max_height=40.0,
    ),
}


def get_preset(name: str) -> TerrainParameters:
    """
    Get a preset by name.

    Raises:
        ValueError: if no preset has that name
    """
    if name not in PRESETS:
        raise ValueError(f"Unknown preset: {name}. Available: {', '.join(list_presets())}")
    return PRESETS[name]


def list_presets() -> List[str]:
    """Names of all presets."""
    return list(PRESETS.keys())
