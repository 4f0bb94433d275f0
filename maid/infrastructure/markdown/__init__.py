"""Markdown adapters for maid."""

from maid.infrastructure.markdown.extractor import (
    count_foreign_lines,
    extract_records,
    indent_width,
)

__all__ = [
    "extract_records",
    "count_foreign_lines",
    "indent_width",
]
