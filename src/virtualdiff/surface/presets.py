"""Named road-surface friction presets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from virtualdiff.utils.exceptions import ConfigurationError


class SurfaceType(str, Enum):
    """Road surface condition."""

    DRY = "DRY"
    WET = "WET"
    SNOW = "SNOW"


@dataclass(frozen=True)
class SurfacePreset:
    """Display label and friction coefficient of a road surface.

    Args:
        label: Human-readable surface name.
        friction_coefficient: Tire-road friction coefficient ``mu`` (-).
    """

    label: str
    friction_coefficient: float


SURFACE_PRESETS = MappingProxyType(
    {
        SurfaceType.DRY: SurfacePreset(label="Dry Tarmac", friction_coefficient=1.0),
        SurfaceType.WET: SurfacePreset(label="Wet Asphalt", friction_coefficient=0.6),
        SurfaceType.SNOW: SurfacePreset(label="Snow/Ice", friction_coefficient=0.3),
    }
)


def parse_surface_type(value: SurfaceType | str) -> SurfaceType:
    """Resolve a surface type from an enum member or its name.

    Args:
        value: ``SurfaceType`` member or case-insensitive surface name.

    Returns:
        Matching surface type.

    Raises:
        virtualdiff.utils.exceptions.ConfigurationError: If ``value`` does not
            name a known surface.
    """
    if isinstance(value, SurfaceType):
        return value
    try:
        return SurfaceType(str(value).upper())
    except ValueError as exc:
        valid = tuple(surface.value for surface in SurfaceType)
        msg = f"surface must be one of {valid}, got: {value!r}"
        raise ConfigurationError(msg) from exc


def surface_preset(surface: SurfaceType | str) -> SurfacePreset:
    """Look up the preset for a road surface.

    Args:
        surface: Surface type or its name.

    Returns:
        Label and friction coefficient of the surface.

    Raises:
        virtualdiff.utils.exceptions.ConfigurationError: If ``surface`` does
            not name a known surface.
    """
    return SURFACE_PRESETS[parse_surface_type(surface)]
