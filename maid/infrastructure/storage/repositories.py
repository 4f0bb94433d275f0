"""Repositories for settings and task documents.

Wrap FileStorage with model validation; every method returns a Result.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from maid.domain.shared.result import Err, Ok, Result
from maid.global_config import MaidSettings, get_config_file
from maid.infrastructure.storage.file_storage import FileStorage

logger = logging.getLogger(__name__)


class SettingsRepository:
    """Repository for user settings persistence.

    A missing settings file is not an error: defaults apply.
    """

    def __init__(self, path: Path | None = None, storage: FileStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Settings file. Defaults to the global config file.
            storage: FileStorage instance to use. Creates new one if not provided.
        """
        self._path = path or get_config_file()
        self._storage = storage or FileStorage()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Result[MaidSettings, str]:
        """Load settings, falling back to defaults when no file exists."""
        if not self._path.exists():
            logger.debug(f"No settings at {self._path}, using defaults")
            return Ok(MaidSettings())

        result = self._storage.load_json(self._path)
        if isinstance(result, Err):
            return result

        try:
            return Ok(MaidSettings(**result.value))
        except ValidationError as e:
            return Err(f"Invalid settings in {self._path}: {e}")

    def save(self, settings: MaidSettings) -> Result[None, str]:
        """Persist settings."""
        return self._storage.save_json(self._path, settings.model_dump())


class DocumentRepository:
    """Repository for the Markdown documents tasks are read from."""

    def __init__(self, storage: FileStorage | None = None) -> None:
        self._storage = storage or FileStorage()

    def load(self, path: Path) -> Result[str, str]:
        """Read a document's full text."""
        return self._storage.read_text(path)

    def save(self, path: Path, text: str) -> Result[None, str]:
        """Replace a document's text."""
        logger.info(f"Writing {len(text)} characters to {path}")
        return self._storage.write_text(path, text)
