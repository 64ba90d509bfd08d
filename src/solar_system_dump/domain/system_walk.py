# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Snapshot to document transform.

Walks the body collection once, finds the root body (the one without an
orbit) and assembles the top-level document. Output order follows the
snapshot order, so equal snapshots give byte-identical documents.
"""
import warnings
from collections.abc import Iterable

from solar_system_dump.domain.body_projection import project_body
from solar_system_dump.domain.model import CelestialBody, SystemSnapshot

SCHEMA_VERSION = 1


class AmbiguousRootWarning(UserWarning):
    """More than one body without an orbit; no root body is reported."""


def _populated(bodies: Iterable[CelestialBody | None]):
    for index, body in enumerate(bodies):
        if body is None or body.name is None:
            continue
        yield index, body


def root_candidates(bodies: Iterable[CelestialBody | None]) -> list[str]:
    """Names of populated bodies without an orbit, in iteration order."""
    return [body.name for _, body in _populated(bodies) if body.orbit is None]


def build_document(snapshot: SystemSnapshot, generator: str | None = None) -> dict:
    """
    Build the complete system document from a snapshot.

    Args:
        snapshot: Host data, read-only.
        generator: Tool identifier recorded in the document, if any.

    Returns:
        JSON-ready dict. rootBody is present only when exactly one body
        has no orbit; with several, AmbiguousRootWarning is issued.
    """
    populated = list(_populated(snapshot.bodies))
    known_bodies = {body.name for _, body in populated}

    document: dict = {'schemaVersion': SCHEMA_VERSION}
    if generator is not None:
        document['generator'] = generator
    if snapshot.game_version is not None:
        document['gameVersion'] = snapshot.game_version
    document['constants'] = {'g0': snapshot.standard_gravity}

    if snapshot.time_units is not None:
        tu = snapshot.time_units
        document['timeUnits'] = {
            'Year': tu.year,
            'Day': tu.day,
            'Hour': tu.hour,
            'Minute': tu.minute,
        }
    if snapshot.enums is not None:
        document['enums'] = snapshot.enums

    roots = root_candidates(snapshot.bodies)
    if len(roots) == 1:
        document['rootBody'] = roots[0]
    elif len(roots) > 1:
        warnings.warn(
            f"Multiple bodies without an orbit: {', '.join(roots)}",
            AmbiguousRootWarning,
            stacklevel=2,
        )

    bodies: dict = {}
    for index, body in populated:
        bodies[body.name] = project_body(body, index, snapshot, known_bodies)
    document['bodies'] = bodies
    return document
