"""Unit tests for road surface presets."""

from __future__ import annotations

import unittest

from virtualdiff.surface import (
    SURFACE_PRESETS,
    SurfacePreset,
    SurfaceType,
    parse_surface_type,
    surface_preset,
)
from virtualdiff.utils.exceptions import ConfigurationError


class SurfacePresetTests(unittest.TestCase):
    """Preset lookup and name parsing."""

    def test_presets_cover_every_surface(self) -> None:
        """Provide dry, wet and snow presets with decreasing grip."""
        self.assertEqual(set(SURFACE_PRESETS), set(SurfaceType))
        self.assertEqual(surface_preset(SurfaceType.DRY).friction_coefficient, 1.0)
        self.assertEqual(surface_preset(SurfaceType.WET).friction_coefficient, 0.6)
        self.assertEqual(surface_preset(SurfaceType.SNOW).friction_coefficient, 0.3)
        self.assertEqual(surface_preset("snow").label, "Snow/Ice")

    def test_parse_surface_type(self) -> None:
        """Resolve names case-insensitively and reject unknown surfaces."""
        self.assertIs(parse_surface_type("Wet"), SurfaceType.WET)
        self.assertIs(parse_surface_type(SurfaceType.DRY), SurfaceType.DRY)
        with self.assertRaises(ConfigurationError):
            parse_surface_type("gravel")

    def test_presets_are_read_only(self) -> None:
        """Prevent modification of the shared preset table."""
        with self.assertRaises(TypeError):
            SURFACE_PRESETS[SurfaceType.DRY] = SurfacePreset("Glue", 5.0)  # type: ignore[index]


if __name__ == "__main__":
    unittest.main()
