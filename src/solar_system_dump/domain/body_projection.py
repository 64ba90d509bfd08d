# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Body record to document fragment.

Surface, ocean and atmosphere sections, and the matching science values,
are emitted only when the body has that capability. Missing optional data
(science values, terrain provider, resource registry) drops the affected
fields instead of failing.
"""
from collections.abc import Container
from dataclasses import dataclass

from solar_system_dump.domain.anomalies import collect_anomalies
from solar_system_dump.domain.model import CelestialBody, SystemSnapshot
from solar_system_dump.domain.orbit_projection import project_orbit
from solar_system_dump.domain.resources import build_resource_index
from solar_system_dump.domain.units import (
    color_to_hex,
    deg_to_rad,
    finite_or_none,
    vector_to_list,
)


@dataclass(frozen=True)
class Capabilities:
    """Feature flags gating the optional sections of a body fragment."""
    solid_surface: bool
    ocean: bool
    atmosphere: bool

    @classmethod
    def of(cls, body: CelestialBody) -> "Capabilities":
        return cls(
            solid_surface=bool(body.has_solid_surface),
            ocean=bool(body.has_ocean),
            atmosphere=bool(body.has_atmosphere),
        )


def _info(body: CelestialBody, index: int, caps: Capabilities) -> dict:
    return {
        'index': index,
        'name': body.name,
        'isStar': body.is_star,
        'isHomeWorld': body.is_home_world,
        'hasSolidSurface': caps.solid_surface,
        'hasOcean': caps.ocean,
        'hasAtmosphere': caps.atmosphere,
        'timeWarpAltitudeLimits': [float(a) for a in body.time_warp_altitude_limits],
        'orbitingBodies': [c for c in body.orbiting_bodies if c is not None],
    }


def _size(body: CelestialBody, standard_gravity: float) -> dict:
    return {
        'radius': body.radius,
        'maxHeight': body.terrain.max_height if body.terrain is not None else 0.0,
        'mass': body.mass,
        'mu': body.grav_parameter,
        'GeeASL': body.gee_asl,
        'g0': standard_gravity * body.gee_asl,
        'sphereOfInfluence': finite_or_none(body.sphere_of_influence),
        'hillSphere': finite_or_none(body.hill_sphere),
    }


def _ocean(body: CelestialBody) -> dict:
    ocean = {'density': body.ocean_density}
    if body.terrain is not None:
        ocean['color'] = color_to_hex(body.terrain.ocean_color)
        ocean['height'] = body.terrain.sea_level
    return ocean


def _rotation(body: CelestialBody) -> dict:
    return {
        'axis': vector_to_list(body.rotation_axis),
        'solarDayLength': body.solar_day_length,
        'rotationPeriod': body.rotation_period,
        'solarRotationPeriod': body.solar_rotation_period,
        'rotates': body.rotates,
        'tidallyLocked': body.tidally_locked,
        'initialRotationRad': deg_to_rad(body.initial_rotation),
        'initialRotationDeg': body.initial_rotation,
    }


def _science(body: CelestialBody, caps: Capabilities) -> dict:
    science: dict = {}
    sv = body.science
    if sv is not None:
        science['spaceAltitudeThreshold'] = sv.space_altitude_threshold
        science['InSpaceHighDataValue'] = sv.in_space_high
        science['InSpaceLowDataValue'] = sv.in_space_low
        if caps.atmosphere:
            science['flyingAltitudeThreshold'] = sv.flying_altitude_threshold
            science['FlyingLowDataValue'] = sv.flying_low
            science['FlyingHighDataValue'] = sv.flying_high
        if caps.solid_surface:
            science['LandedDataValue'] = sv.landed
        if caps.ocean:
            science['SplashedDataValue'] = sv.splashed
        science['RecoveryValue'] = sv.recovery
    science['biomes'] = list(body.biomes)
    science['miniBiomes'] = list(body.mini_biomes)
    return science


def project_body(
    body: CelestialBody,
    index: int,
    snapshot: SystemSnapshot,
    known_bodies: Container[str],
) -> dict:
    """
    Assemble the full document fragment of one body.

    Args:
        body: Body to project.
        index: Position of the body in the snapshot's body collection.
        snapshot: Snapshot supplying the global inputs (standard gravity,
            launch sites, resource registry).
        known_bodies: Names of all bodies, for orbit reference resolution.

    Returns:
        Fragment dict with keys in document order.
    """
    caps = Capabilities.of(body)

    fragment = {
        'info': _info(body, index, caps),
        'size': _size(body, snapshot.standard_gravity),
        'optics': {'albedo': body.albedo, 'emissivity': body.emissivity},
    }
    if caps.solid_surface:
        fragment['surface'] = {
            'maxHeight': fragment['size']['maxHeight'],
            'biomes': list(body.biomes),
            'miniBiomes': list(body.mini_biomes),
        }
    if caps.ocean:
        fragment['ocean'] = _ocean(body)
    if caps.atmosphere:
        fragment['atmosphere'] = {
            'atmosphereDepth': body.atmosphere_depth,
            'atmosphereContainsOxygen': body.atmosphere_contains_oxygen,
        }
    fragment['rotation'] = _rotation(body)
    fragment['orbit'] = project_orbit(body.orbit, known_bodies)
    fragment['science'] = _science(body, caps)
    fragment['anomalies'] = collect_anomalies(body, snapshot.launch_sites)

    roc = build_resource_index(snapshot.resource_occurrences, body.name)
    if roc is not None:
        fragment['roc'] = roc
    return fragment
