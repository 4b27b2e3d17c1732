import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import StorageError
from app.storage.base import RecordT, Repository

logger = logging.getLogger(__name__)


class JsonFileRepository(Repository[RecordT]):
    """Stores a collection as a JSON array in a single file."""

    def __init__(self, path: Path, model: type[RecordT]) -> None:
        super().__init__(model)
        self.path = Path(path)
        self._adapter = TypeAdapter(list[model])

    def load_all(self) -> list[RecordT]:
        if not self.path.exists():
            try:
                self.save_all([])
            except StorageError:
                logger.error(f"Could not initialize {self.path}, treating as empty")
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            return self._adapter.validate_json(raw)
        except (OSError, ValueError, PydanticValidationError) as e:
            # Unreadable data is discarded rather than failing the request.
            logger.error(f"Error reading {self.path}, treating as empty: {e}")
            return []

    def save_all(self, items: Sequence[RecordT]) -> None:
        data = [item.model_dump(mode="json", by_alias=True) for item in items]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Error writing {self.path}: {e}")
            raise StorageError(f"Could not write {self.path.name}") from e
