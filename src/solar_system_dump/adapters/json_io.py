# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON snapshot/document I/O adapter.

Reads host snapshots from JSON (snake_case keys matching the domain
dataclasses) and writes the system document as 2-space indented JSON
terminated by a newline.
"""
import json
from typing import Any

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
    STANDARD_GRAVITY,
)
from solar_system_dump.ports import DocumentWriter, SnapshotReader

_EXPLICIT_BODY_KEYS = {
    'name', 'orbit', 'science', 'terrain', 'surface_anomalies',
    'rotation_axis', 'time_warp_altitude_limits', 'biomes',
    'mini_biomes', 'orbiting_bodies',
}


def _vector(raw) -> tuple[float, ...] | None:
    if raw is None:
        return None
    return tuple(float(c) for c in raw)


def _anomaly(raw: dict | None) -> SurfaceAnomaly | None:
    if raw is None:
        return None
    try:
        kind = AnomalyKind(raw.get('kind'))
    except ValueError:
        kind = AnomalyKind.UNCLASSIFIED
    return SurfaceAnomaly(
        name=raw['name'],
        display_name=raw.get('display_name', raw['name']),
        kind=kind,
        position=_vector(raw['position']),
        uid=raw.get('uid'),
    )


def _orbit(raw: dict | None) -> Orbit | None:
    if raw is None:
        return None
    fields = dict(raw)
    fields['normal'] = _vector(fields.get('normal'))
    return Orbit(**fields)


def _body(raw: dict | None) -> CelestialBody | None:
    if raw is None:
        return None
    scalars = {k: v for k, v in raw.items() if k not in _EXPLICIT_BODY_KEYS}
    terrain = raw.get('terrain')
    science = raw.get('science')
    anomalies = raw.get('surface_anomalies')
    if 'rotation_axis' in raw:
        scalars['rotation_axis'] = _vector(raw['rotation_axis'])
    return CelestialBody(
        name=raw.get('name'),
        **scalars,
        time_warp_altitude_limits=tuple(raw.get('time_warp_altitude_limits', ())),
        orbit=_orbit(raw.get('orbit')),
        science=ScienceValues(**science) if science is not None else None,
        terrain=TerrainProvider(
            max_height=terrain['max_height'],
            ocean_color=_vector(terrain.get('ocean_color')),
            sea_level=terrain.get('sea_level', 0.0),
        ) if terrain is not None else None,
        surface_anomalies=(
            tuple(_anomaly(a) for a in anomalies) if anomalies is not None else None
        ),
        biomes=tuple(raw.get('biomes', ())),
        mini_biomes=tuple(raw.get('mini_biomes', ())),
        orbiting_bodies=tuple(raw.get('orbiting_bodies', ())),
    )


def _resource(raw: dict) -> ResourceOccurrence:
    bodies = raw.get('bodies')
    return ResourceOccurrence(
        resource_type=raw['resource_type'],
        bodies=tuple(
            BodyOccurrence(
                body_name=b['body_name'],
                biomes=tuple(b['biomes']) if b.get('biomes') is not None else None,
            )
            for b in bodies
        ) if bodies is not None else None,
    )


def snapshot_from_dict(raw: dict[str, Any]) -> SystemSnapshot:
    """Build a SystemSnapshot from its JSON representation."""
    rocs = raw.get('resource_occurrences')
    time_units = raw.get('time_units')
    return SystemSnapshot(
        bodies=tuple(_body(b) for b in raw.get('bodies', [])),
        resource_occurrences=(
            tuple(_resource(r) for r in rocs) if rocs is not None else None
        ),
        launch_sites=tuple(
            LaunchSite(body_name=s['body_name'], anomaly=_anomaly(s.get('anomaly')))
            for s in raw.get('launch_sites', [])
        ),
        time_units=TimeUnits(**time_units) if time_units is not None else None,
        enums=raw.get('enums'),
        game_version=raw.get('game_version'),
        standard_gravity=raw.get('standard_gravity', STANDARD_GRAVITY),
    )


class JsonSnapshotReader(SnapshotReader):
    """Reads host snapshots from JSON files."""

    def read_snapshot(self, path: str) -> SystemSnapshot:
        with open(path, encoding='utf-8') as f:
            return snapshot_from_dict(json.load(f))


def serialize_document(document: dict) -> str:
    """Pretty-printed JSON text; non-finite floats raise ValueError."""
    return json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False) + "\n"


class JsonDocumentWriter(DocumentWriter):
    """Writes the system document to a JSON file."""

    def write_document(self, document: dict, path: str, overwrite: bool = True) -> bool:
        text = serialize_document(document)
        mode = 'w' if overwrite else 'x'
        try:
            with open(path, mode, encoding='utf-8') as f:
                f.write(text)
        except FileExistsError:
            return False
        return True
