"""
Persistence store module.

Stands, hunters and the activity log are each kept as a JSON array in their
own file inside the data directory. Every load reads a whole collection and
every save rewrites one, so callers work on snapshots and persist them back.

There is no transaction across files: a crash between two saves can leave
the collections out of step with each other.

Date: 2026-10-19
"""

import enum
import json
import logging
import os
import tempfile
from typing import List, Sequence, Type

from pydantic import ValidationError as SchemaError

from logic.errors import StorageError
from logic.models import ActivityEntry, CampModel, Hunter, Stand

_logger = logging.getLogger(__name__)


class EntitySet(enum.Enum):
    STANDS = ("stands.json", Stand)
    HUNTERS = ("hunters.json", Hunter)
    ACTIVITY = ("activity.json", ActivityEntry)

    def __init__(self, filename: str, model: Type[CampModel]):
        self.filename = filename
        self.model = model


class JsonStore:
    """Loads and saves whole collections as JSON files.

    Attributes:
        data_dir: Directory holding stands.json, hunters.json and activity.json.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def path(self, entity_set: EntitySet) -> str:
        return os.path.join(self.data_dir, entity_set.filename)

    def ensure_files(self):
        """Create the data directory and any missing collection as ``[]``."""
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            for entity_set in EntitySet:
                if not os.path.exists(self.path(entity_set)):
                    _logger.info("Creating empty %s", self.path(entity_set))
                    self.save(entity_set, [])
        except OSError as e:
            _logger.exception("Could not prepare data directory %s", self.data_dir)
            raise StorageError("Failed to prepare data directory") from e

    def load(self, entity_set: EntitySet) -> List[CampModel]:
        """Load a whole collection.

        Args:
            entity_set: Which collection to read.

        Returns:
            List of validated records, in file order.

        Raises:
            StorageError: If the file is missing, not JSON, or not a list of
                records of the expected shape.
        """
        path = self.path(entity_set)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise StorageError(f"Expected a JSON array in {entity_set.filename}")
            return [entity_set.model.model_validate(item) for item in raw]
        except StorageError:
            _logger.error("Malformed collection at %s", path)
            raise
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, SchemaError) as e:
            _logger.exception("Failed to load %s", path)
            raise StorageError(f"Failed to load {entity_set.filename}") from e

    def save(self, entity_set: EntitySet, items: Sequence[CampModel]):
        """Overwrite a whole collection.

        The content is written to a temporary file in the data directory and
        moved over the old file, so a reader never sees a half-written array.

        Raises:
            StorageError: If the file cannot be written.
        """
        path = self.path(entity_set)
        payload = [item.to_json() for item in items]
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self.data_dir, prefix=f".{entity_set.filename}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError as e:
            _logger.exception("Failed to save %s", path)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Failed to save {entity_set.filename}") from e
