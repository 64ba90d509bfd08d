# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Surface anomaly collection.

Anomalies are discovered through more than one path (the body's own
surface objects and the launch-site registry), so the collector keeps a
per-body set of stable keys and emits each anomaly at most once.
"""
import math
from collections.abc import Iterable

import numpy as np

from solar_system_dump.domain.model import (
    AnomalyKind,
    CelestialBody,
    LaunchSite,
    SurfaceAnomaly,
    Vector3,
)

PLACEHOLDER_NAME = "Randolith"
PLACEHOLDER_LAT_DEG = -28.80831
PLACEHOLDER_LON_DEG = -13.44011
PLACEHOLDER_TOLERANCE_DEG = 1e-3

_COLLECTIBLE = (AnomalyKind.WAYPOINT, AnomalyKind.CITY)


def surface_lat_lon(position: Vector3) -> tuple[float, float]:
    """
    Latitude and longitude (degrees) of a body-relative position.

        lat = asin(y / |p|)
        lon = atan2(z, x)

    A zero vector maps to (0, 0).
    """
    p = np.asarray(position, dtype=np.float64)
    norm = np.linalg.norm(p)
    if norm == 0.0:
        return 0.0, 0.0
    y = float(np.clip(p[1] / norm, -1.0, 1.0))
    lat = math.degrees(math.asin(y))
    lon = math.degrees(math.atan2(p[2], p[0]))
    return lat, lon


def is_placeholder(name: str, lat: float, lon: float) -> bool:
    """True for the stock placeholder instance that was never relocated."""
    return (
        name == PLACEHOLDER_NAME
        and abs(lat - PLACEHOLDER_LAT_DEG) <= PLACEHOLDER_TOLERANCE_DEG
        and abs(lon - PLACEHOLDER_LON_DEG) <= PLACEHOLDER_TOLERANCE_DEG
    )


class AnomalyCollector:
    """Collects the anomaly records of one body, in discovery order."""

    def __init__(self, body_name: str):
        self.body_name = body_name
        self._visited: set[str] = set()
        self._records: list[dict] = []

    def offer(self, candidate: SurfaceAnomaly | None) -> bool:
        """Add candidate unless it is missing, seen, unclassified or a placeholder."""
        if candidate is None or candidate.key in self._visited:
            return False
        if candidate.kind not in _COLLECTIBLE:
            return False

        lat, lon = surface_lat_lon(candidate.position)
        if is_placeholder(candidate.name, lat, lon):
            return False

        self._records.append({
            'name': candidate.name,
            'objectName': candidate.display_name,
            'lat': lat,
            'lon': lon,
            'kind': candidate.kind.value,
        })
        self._visited.add(candidate.key)
        return True

    @property
    def records(self) -> list[dict]:
        return list(self._records)


def collect_anomalies(
    body: CelestialBody,
    launch_sites: Iterable[LaunchSite] = (),
) -> list[dict]:
    """Anomalies of body: its own surface objects first, then its launch sites."""
    collector = AnomalyCollector(body.name)
    for anomaly in body.surface_anomalies or ():
        collector.offer(anomaly)
    for site in launch_sites:
        if site.body_name == body.name:
            collector.offer(site.anomaly)
    return collector.records
