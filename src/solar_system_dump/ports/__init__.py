# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces between the transform and the outside world.

Adapters implement these; the domain never touches files.
"""
from abc import ABC, abstractmethod

from solar_system_dump.domain.model import SystemSnapshot


class SnapshotReader(ABC):
    """Loads a host snapshot."""

    @abstractmethod
    def read_snapshot(self, path: str) -> SystemSnapshot:
        ...


class DocumentWriter(ABC):
    """Persists a finished document."""

    @abstractmethod
    def write_document(self, document: dict, path: str, overwrite: bool = True) -> bool:
        """
        Write document to path.

        Returns False, leaving the file untouched, when overwrite is False
        and the file already exists.
        """
        ...
