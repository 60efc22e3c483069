"""
Snapshot storage for change detection.

This module provides the SnapshotStore class which keeps the previous run's
lead and processed fraction in a small JSON file.
"""

import json
import logging
import math
import os
from typing import Any

from leadwatch.errors import StorageError
from leadwatch.models import Snapshot

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Reads and overwrites the persisted snapshot file."""

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        """Whether a snapshot file is present."""
        return os.path.exists(self.path)

    def load(self) -> Snapshot:
        """Loads the previous snapshot. A missing file is an error."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data: Any = json.load(f)
        except OSError as e:
            raise StorageError(f"Cannot read snapshot {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StorageError(f"Snapshot {self.path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Snapshot {self.path} must contain a JSON object")

        lead = data.get("lead")
        processed = data.get("processed")
        if isinstance(lead, bool) or not isinstance(lead, int):
            raise StorageError(f"Snapshot {self.path} has no integer 'lead'")
        if (
            isinstance(processed, bool)
            or not isinstance(processed, (int, float))
            or (isinstance(processed, float) and not math.isfinite(processed))
        ):
            raise StorageError(f"Snapshot {self.path} has no numeric 'processed'")

        return Snapshot(lead=lead, processed=float(processed))

    def save(self, snapshot: Snapshot) -> None:
        """Overwrites the snapshot file. The write is not atomic."""
        try:
            content = json.dumps(
                {"lead": snapshot["lead"], "processed": snapshot["processed"]},
                allow_nan=False,
            )
        except ValueError as e:
            raise StorageError(f"Snapshot for {self.path} is not JSON-safe: {e}") from e
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StorageError(f"Cannot write snapshot {self.path}: {e}") from e
        logger.info("Saved snapshot to %s.", self.path)
