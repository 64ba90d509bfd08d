# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar System Dump

Render a live hierarchy of celestial bodies (physical data, orbital
elements, surface anomalies, resource occurrences) into one deterministic
JSON document per run.
"""

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
from solar_system_dump.domain.anomalies import AnomalyCollector, collect_anomalies
from solar_system_dump.domain.resources import build_resource_index
from solar_system_dump.domain.orbit_projection import project_orbit
from solar_system_dump.domain.body_projection import Capabilities, project_body
from solar_system_dump.domain.system_walk import (
    AmbiguousRootWarning,
    build_document,
    root_candidates,
)
from solar_system_dump.version import __version__

__all__ = [
    "AnomalyKind",
    "BodyOccurrence",
    "CelestialBody",
    "LaunchSite",
    "Orbit",
    "ResourceOccurrence",
    "ScienceValues",
    "SurfaceAnomaly",
    "SystemSnapshot",
    "TerrainProvider",
    "TimeUnits",
    "AnomalyCollector",
    "collect_anomalies",
    "build_resource_index",
    "project_orbit",
    "Capabilities",
    "project_body",
    "AmbiguousRootWarning",
    "build_document",
    "root_candidates",
    "__version__",
]
