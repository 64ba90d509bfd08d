# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Host lifecycle hooks that trigger the dump."""
import logging
from collections.abc import Callable

from solar_system_dump.adapters.exporter import DumpMode, DumpState, SnapshotExporter
from solar_system_dump.domain.model import SystemSnapshot

logger = logging.getLogger(__name__)


class DumpLifecycle:
    """
    Binds an exporter to the host's startup and scene-change events.

    snapshot_source is called at trigger time, when the host simulation
    is quiescent.
    """

    def __init__(
        self,
        exporter: SnapshotExporter,
        snapshot_source: Callable[[], SystemSnapshot],
    ):
        self.exporter = exporter
        self.snapshot_source = snapshot_source

    def on_start(self) -> DumpState:
        logger.debug("start event")
        return self.exporter.dump_from(self.snapshot_source)

    def on_scene_change(self) -> DumpState:
        if self.exporter.config.mode is not DumpMode.RETRIGGER:
            return self.exporter.state
        logger.debug("scene change event")
        return self.exporter.dump_from(self.snapshot_source)
