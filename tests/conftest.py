# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Shared snapshot fixtures: a small Kerbol system."""
import math

import pytest

from solar_system_dump.domain.model import (
    AnomalyKind,
    BodyOccurrence,
    CelestialBody,
    LaunchSite,
    Orbit,
    ResourceOccurrence,
    ScienceValues,
    SurfaceAnomaly,
    SystemSnapshot,
    TerrainProvider,
    TimeUnits,
)


def position_at(lat_deg: float, lon_deg: float, radius: float = 1000.0):
    """Body-relative position for a surface latitude/longitude."""
    lat = math.radians(lat_deg)
    lon = math.radians(lon_deg)
    return (
        radius * math.cos(lat) * math.cos(lon),
        radius * math.sin(lat),
        radius * math.cos(lat) * math.sin(lon),
    )


def make_orbit(reference_body="Kerbin", **overrides) -> Orbit:
    fields = dict(
        reference_body=reference_body,
        period=138984.38,
        semi_major_axis=12_000_000.0,
        semi_latus_rectum=12_000_000.0,
        eccentricity=0.0,
        inclination=0.0,
        lan=0.0,
        argument_of_periapsis=0.0,
        mean_anomaly_at_epoch=1.7,
    )
    fields.update(overrides)
    return Orbit(**fields)


SCIENCE = ScienceValues(
    flying_altitude_threshold=18000.0,
    space_altitude_threshold=250000.0,
    in_space_high=1.5,
    in_space_low=1.0,
    flying_low=0.7,
    flying_high=0.9,
    landed=0.3,
    splashed=0.4,
    recovery=1.0,
)

KSC = SurfaceAnomaly(
    name="KSC",
    display_name="Kerbal Space Center",
    kind=AnomalyKind.CITY,
    position=position_at(-0.0972, -74.5577, 600_000.0),
    uid="kerbin/ksc",
)


@pytest.fixture
def kerbol():
    return CelestialBody(
        name="Sun",
        radius=261_600_000.0,
        mass=1.7565459e28,
        grav_parameter=1.1723328e18,
        gee_asl=1.746,
        is_star=True,
        orbiting_bodies=("Kerbin",),
    )


@pytest.fixture
def kerbin():
    return CelestialBody(
        name="Kerbin",
        radius=600_000.0,
        mass=5.2915158e22,
        grav_parameter=3.5316e12,
        gee_asl=1.0,
        sphere_of_influence=84_159_286.0,
        hill_sphere=float("inf"),
        ocean_density=1.0,
        has_solid_surface=True,
        has_ocean=True,
        has_atmosphere=True,
        atmosphere_contains_oxygen=True,
        atmosphere_depth=70_000.0,
        is_home_world=True,
        rotation_period=21549.425,
        solar_day_length=21600.0,
        initial_rotation=90.0,
        time_warp_altitude_limits=(0, 70000, 70000, 70000, 120000, 240000, 480000, 600000),
        orbit=make_orbit("Sun", semi_major_axis=13_599_840_256.0, mean_anomaly_at_epoch=3.14),
        science=SCIENCE,
        terrain=TerrainProvider(max_height=6767.0, ocean_color=(1.0, 0.0, 0.0, 0.5), sea_level=0.0),
        surface_anomalies=(KSC,),
        biomes=("Shores", "Grasslands", "Ice Caps"),
        mini_biomes=("KSC", "Runway"),
        orbiting_bodies=("Mun", None, "Minmus"),
    )


@pytest.fixture
def mun():
    return CelestialBody(
        name="Mun",
        radius=200_000.0,
        gee_asl=0.166,
        has_solid_surface=True,
        tidally_locked=True,
        orbit=make_orbit(),
        science=SCIENCE,
        surface_anomalies=(
            SurfaceAnomaly(
                name="UFO",
                display_name="Monolith",
                kind=AnomalyKind.WAYPOINT,
                position=position_at(10.0, 20.0),
                uid="mun/ufo",
            ),
            SurfaceAnomaly(
                name="Rock",
                display_name="Rock",
                kind=AnomalyKind.UNCLASSIFIED,
                position=position_at(1.0, 2.0),
            ),
        ),
        biomes=("Midlands", "Highlands"),
    )


@pytest.fixture
def minmus():
    return CelestialBody(
        name="Minmus",
        radius=60_000.0,
        gee_asl=0.05,
        has_solid_surface=True,
        orbit=make_orbit(semi_major_axis=47_000_000.0, inclination=6.0),
    )


@pytest.fixture
def rocs():
    return (
        ResourceOccurrence(
            resource_type="Ore",
            bodies=(
                BodyOccurrence(body_name="Mun", biomes=("Midlands", "Highlands")),
                BodyOccurrence(body_name="Kerbin", biomes=("Ice Caps",)),
            ),
        ),
    )


@pytest.fixture
def snapshot(kerbol, kerbin, mun, minmus, rocs):
    return SystemSnapshot(
        bodies=(kerbol, kerbin, None, mun, minmus),
        resource_occurrences=rocs,
        launch_sites=(LaunchSite(body_name="Kerbin", anomaly=KSC),),
        time_units=TimeUnits(year=9_203_545.0, day=21_600.0, hour=3600.0, minute=60.0),
        enums={"ExperimentSituations": ["SrfLanded", "SrfSplashed", "FlyingLow"]},
        game_version="1.12.5",
    )
