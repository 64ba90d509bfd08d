# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Read-only snapshot of a simulated planetary system.

Plain value objects handed over by the host simulation. The transform
never mutates them. No external dependencies — only stdlib dataclasses/enum.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class Orbit:
    """Classical orbital elements of one body around its reference body.

    Angles are in degrees, except mean_anomaly_at_epoch which the host
    stores in radians.
    """
    reference_body: str | None
    period: float
    semi_major_axis: float
    semi_latus_rectum: float
    eccentricity: float
    inclination: float
    lan: float
    argument_of_periapsis: float
    mean_anomaly_at_epoch: float
    normal: Vector3 | None = None


@dataclass(frozen=True)
class ScienceValues:
    """Science multipliers and altitude thresholds of a body."""
    flying_altitude_threshold: float
    space_altitude_threshold: float
    in_space_high: float
    in_space_low: float
    flying_low: float
    flying_high: float
    landed: float
    splashed: float
    recovery: float


@dataclass(frozen=True)
class TerrainProvider:
    """Surface-height provider attached to bodies with terrain."""
    max_height: float
    ocean_color: tuple[float, ...] | None = None
    sea_level: float = 0.0


class AnomalyKind(Enum):
    WAYPOINT = "waypoint"
    CITY = "city"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class SurfaceAnomaly:
    """A point of interest on a body surface.

    position is relative to the body centre, in the body frame.
    """
    name: str
    display_name: str
    kind: AnomalyKind
    position: Vector3
    uid: str | None = None

    @property
    def key(self) -> str:
        """Stable identity used for deduplication."""
        return self.uid if self.uid is not None else self.name


@dataclass(frozen=True)
class LaunchSite:
    """Launch-site registry entry pointing at a surface anomaly."""
    body_name: str
    anomaly: SurfaceAnomaly | None


@dataclass(frozen=True)
class BodyOccurrence:
    body_name: str
    biomes: tuple[str, ...] | None


@dataclass(frozen=True)
class ResourceOccurrence:
    """Where one resource type appears, per body and biome."""
    resource_type: str
    bodies: tuple[BodyOccurrence, ...] | None = ()


@dataclass(frozen=True)
class TimeUnits:
    """Calendar unit lengths in seconds."""
    year: float
    day: float
    hour: float
    minute: float


@dataclass(frozen=True)
class CelestialBody:
    """A star, planet or moon as exposed by the host simulation."""
    name: str | None
    radius: float = 0.0
    mass: float = 0.0
    grav_parameter: float = 0.0
    gee_asl: float = 0.0
    sphere_of_influence: float = float("inf")
    hill_sphere: float = float("inf")
    ocean_density: float = 0.0
    albedo: float = 0.0
    emissivity: float = 0.0
    is_star: bool = False
    has_solid_surface: bool = False
    has_ocean: bool = False
    has_atmosphere: bool = False
    atmosphere_contains_oxygen: bool = False
    atmosphere_depth: float = 0.0
    is_home_world: bool = False
    rotation_axis: Vector3 | None = (0.0, 1.0, 0.0)
    rotation_period: float = 0.0
    solar_day_length: float = 0.0
    solar_rotation_period: float = 0.0
    rotates: bool = True
    tidally_locked: bool = False
    initial_rotation: float = 0.0
    time_warp_altitude_limits: tuple[float, ...] = ()
    orbit: Orbit | None = None
    science: ScienceValues | None = None
    terrain: TerrainProvider | None = None
    surface_anomalies: tuple[SurfaceAnomaly | None, ...] | None = ()
    biomes: tuple[str, ...] = ()
    mini_biomes: tuple[str, ...] = ()
    orbiting_bodies: tuple[str | None, ...] = ()


STANDARD_GRAVITY = 9.81


@dataclass(frozen=True)
class SystemSnapshot:
    """Everything the dumper reads from the host, frozen at trigger time.

    bodies may contain None for unpopulated slots. resource_occurrences is
    None when the host has no resource registry at all.
    """
    bodies: tuple[CelestialBody | None, ...]
    resource_occurrences: tuple[ResourceOccurrence, ...] | None = None
    launch_sites: tuple[LaunchSite, ...] = ()
    time_units: TimeUnits | None = None
    enums: dict[str, Any] | None = None
    game_version: str | None = None
    standard_gravity: float = STANDARD_GRAVITY
