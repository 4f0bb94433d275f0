"""Global configuration for maid.

Stores user preferences in ``~/.maid/config.json`` (or the directory named
by ``MAID_CONFIG_DIR``).
"""

import os
from pathlib import Path

from pydantic import BaseModel, field_validator

from maid.domain.task import DEFAULT_INDENT, SchedulingConfig

CONFIG_DIR_ENV = "MAID_CONFIG_DIR"
CONFIG_FILE = "config.json"


class MaidSettings(BaseModel):
    """User settings.

    ``reorder_enabled`` guards the reorder command: rewriting a whole
    document is opt-in.
    """

    default_priority: int = 0
    priority_inheritance: bool = False
    reorder_enabled: bool = False
    median_split: bool = False
    indent: str = DEFAULT_INDENT

    model_config = {"extra": "ignore", "validate_assignment": True}

    @field_validator("indent")
    @classmethod
    def _indent_is_whitespace(cls, value: str) -> str:
        if not value or value.strip(" \t"):
            raise ValueError("indent must be a non-empty run of spaces or tabs")
        return value

    def scheduling(self) -> SchedulingConfig:
        """The subset of settings the task forest is resolved against."""
        return SchedulingConfig(
            default_priority=self.default_priority,
            priority_inheritance=self.priority_inheritance,
        )


def get_config_dir() -> Path:
    """Get the maid config directory (not created here)."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".maid"


def get_config_file() -> Path:
    """Get the path of the settings file."""
    return get_config_dir() / CONFIG_FILE
