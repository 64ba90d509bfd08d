# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit record to document fragment.

Every angular element is emitted in both degrees and radians. The host
stores inclination, LAN and argument of periapsis in degrees, and mean
anomaly at epoch in radians.
"""
from collections.abc import Container

from solar_system_dump.domain.model import Orbit
from solar_system_dump.domain.units import deg_to_rad, rad_to_deg, vector_to_list


def project_orbit(
    orbit: Orbit | None,
    known_bodies: Container[str],
) -> dict | None:
    """
    Project one orbit into its document fragment.

    Args:
        orbit: Orbit of the body, or None for the root body.
        known_bodies: Names of bodies present in the snapshot; a reference
            body outside this set is reported as None.

    Returns:
        Fragment dict, or None when there is no orbit.
    """
    if orbit is None:
        return None

    ref = orbit.reference_body
    fragment = {
        'referenceBody': ref if ref is not None and ref in known_bodies else None,
        'period': orbit.period,
        'semiMajorAxis': orbit.semi_major_axis,
        'semiLatusRectum': orbit.semi_latus_rectum,
        'eccentricity': orbit.eccentricity,
        'inclinationRad': deg_to_rad(orbit.inclination),
        'inclinationDeg': orbit.inclination,
        'longitudeOfAscendingNodeRad': deg_to_rad(orbit.lan),
        'longitudeOfAscendingNodeDeg': orbit.lan,
        'argumentOfPeriapsisRad': deg_to_rad(orbit.argument_of_periapsis),
        'argumentOfPeriapsisDeg': orbit.argument_of_periapsis,
        'meanAnomalyAtEpochRad': orbit.mean_anomaly_at_epoch,
        'meanAnomalyAtEpochDeg': rad_to_deg(orbit.mean_anomaly_at_epoch),
    }
    if orbit.normal is not None:
        fragment['normal'] = vector_to_list(orbit.normal)
    return fragment
