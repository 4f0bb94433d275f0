"""Infrastructure layer for maid.

Adapters for everything outside the pure task domain.

Exports:
    Markdown:
        - extract_records: Document text -> TaskRecord sequence
        - count_foreign_lines: Lines a reorder would not carry over

    Storage:
        - FileStorage: Low-level text/JSON file I/O
        - SettingsRepository: User settings persistence
        - DocumentRepository: Task document read/write
"""

from maid.infrastructure.markdown import count_foreign_lines, extract_records
from maid.infrastructure.storage import (
    DocumentRepository,
    FileStorage,
    SettingsRepository,
)

__all__ = [
    # Markdown
    "extract_records",
    "count_foreign_lines",
    # Storage
    "FileStorage",
    "SettingsRepository",
    "DocumentRepository",
]
