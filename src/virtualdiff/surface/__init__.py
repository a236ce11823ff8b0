"""Road surface presets."""

from virtualdiff.surface.presets import (
    SURFACE_PRESETS,
    SurfacePreset,
    SurfaceType,
    parse_surface_type,
    surface_preset,
)

__all__ = [
    "SURFACE_PRESETS",
    "SurfacePreset",
    "SurfaceType",
    "parse_surface_type",
    "surface_preset",
]
