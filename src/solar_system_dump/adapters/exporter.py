# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Snapshot exporter with explicit dump state.

ONCE mode writes at most one document per exporter, whatever the outcome.
RETRIGGER mode attempts on every trigger but never replaces an existing
file, so the first written snapshot wins. Failures are logged and recorded,
never raised to the host.
"""
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from solar_system_dump.adapters.json_io import JsonDocumentWriter
from solar_system_dump.domain.model import SystemSnapshot
from solar_system_dump.domain.system_walk import build_document
from solar_system_dump.ports import DocumentWriter

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "SolarSystemDump.json"

_PACKAGE_DIR = Path(__file__).resolve().parents[1]


class DumpState(Enum):
    NOT_ATTEMPTED = "not_attempted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class DumpMode(Enum):
    ONCE = "once"
    RETRIGGER = "retrigger"


@dataclass(frozen=True)
class ExportConfig:
    """Where and how often the document is written."""
    output_dir: Path = _PACKAGE_DIR
    file_name: str = DEFAULT_FILE_NAME
    mode: DumpMode = DumpMode.ONCE

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / self.file_name

    @classmethod
    def from_env(cls, environ=None) -> "ExportConfig":
        """
        Build a config from SOLAR_DUMP_OUTPUT_DIR, SOLAR_DUMP_FILE_NAME
        and SOLAR_DUMP_MODE, falling back to the defaults.

        Raises:
            ValueError: If SOLAR_DUMP_MODE is not a known mode.
        """
        env = os.environ if environ is None else environ
        output_dir = env.get("SOLAR_DUMP_OUTPUT_DIR")
        mode = env.get("SOLAR_DUMP_MODE")
        return cls(
            output_dir=Path(output_dir) if output_dir else _PACKAGE_DIR,
            file_name=env.get("SOLAR_DUMP_FILE_NAME") or DEFAULT_FILE_NAME,
            mode=DumpMode(mode.lower()) if mode else DumpMode.ONCE,
        )


class SnapshotExporter:
    """Builds and writes the system document, tracking the dump state."""

    def __init__(
        self,
        config: ExportConfig,
        writer: DocumentWriter | None = None,
        generator: str | None = None,
    ):
        self.config = config
        self.writer = writer or JsonDocumentWriter()
        self.generator = generator
        self.state = DumpState.NOT_ATTEMPTED

    def dump(self, snapshot: SystemSnapshot) -> DumpState:
        """Write the document for snapshot if this trigger is allowed to."""
        return self.dump_from(lambda: snapshot)

    def dump_from(self, snapshot_source: Callable[[], SystemSnapshot]) -> DumpState:
        """
        Fetch a snapshot from snapshot_source and write its document.

        The source is only called when this trigger is allowed to write.
        Any exception from fetching, building or writing is logged and
        recorded as FAILED.
        """
        if self.config.mode is DumpMode.ONCE and self.state is not DumpState.NOT_ATTEMPTED:
            logger.debug("dump already attempted (%s), skipping", self.state.value)
            return self.state

        path = self.config.output_path
        overwrite = self.config.mode is DumpMode.ONCE
        try:
            document = build_document(snapshot_source(), generator=self.generator)
            logger.info("dumping to %s", path)
            written = self.writer.write_document(document, str(path), overwrite=overwrite)
        except Exception:
            logger.exception("can't save %s", path)
            self.state = DumpState.FAILED
            return self.state

        if written:
            logger.info("dumped %d bodies", len(document['bodies']))
        else:
            logger.debug("%s already exists, keeping first snapshot", path)
        self.state = DumpState.SUCCEEDED
        return self.state
