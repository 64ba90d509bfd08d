# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Per-body index of resource occurrences (ROC)."""
from collections.abc import Iterable

from solar_system_dump.domain.model import ResourceOccurrence


def normalize_biome(name: str) -> str:
    return name.replace(" ", "")


def build_resource_index(
    occurrences: Iterable[ResourceOccurrence] | None,
    body_name: str,
) -> dict[str, list[str]] | None:
    """
    Invert the flat occurrence list into resource type -> biomes for one body.

    Biome lists of repeated entries for the same type and body are
    concatenated. Types that never match the body are left out.

    Args:
        occurrences: Registry contents, or None when there is no registry.
        body_name: Body to index.

    Returns:
        Mapping (possibly empty), or None when the registry is unavailable.
    """
    if occurrences is None:
        return None

    index: dict[str, list[str]] = {}
    for roc in occurrences:
        for entry in roc.bodies or ():
            if entry.body_name != body_name or entry.biomes is None:
                continue
            biomes = index.setdefault(roc.resource_type, [])
            biomes.extend(normalize_biome(b) for b in entry.biomes)
    return index
