"""Storage infrastructure for maid.

Provides persistence for settings and task documents, using Result
monads for explicit error handling.
"""

from maid.infrastructure.storage.file_storage import FileStorage
from maid.infrastructure.storage.repositories import (
    DocumentRepository,
    SettingsRepository,
)

__all__ = [
    "FileStorage",
    "SettingsRepository",
    "DocumentRepository",
]
