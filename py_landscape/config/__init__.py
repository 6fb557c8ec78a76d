"""
Configuration modules for terrain generation.
"""

from .config import Settings, settings
from .terrain_presets import PRESETS, get_preset, list_presets

__all__ = ['Settings', 'settings', 'PRESETS', 'get_preset', 'list_presets']
