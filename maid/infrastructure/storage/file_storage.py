"""File storage with Result-based error handling.

Thin wrappers around reading and writing text and JSON files that return
Result values instead of raising.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from maid.domain.shared.result import Err, Ok, Result


class FileStorage:
    """Low-level file I/O with Result-based error handling.

    No domain logic lives here - just file I/O.

    Example:
        storage = FileStorage()
        result = storage.read_text(Path("todo.md"))
        if isinstance(result, Ok):
            text = result.value
        else:
            print(f"Error: {result.error}")
    """

    def read_text(self, path: Path) -> Result[str, str]:
        """Read a UTF-8 text file.

        Returns:
            Ok(str) with the file contents, Err(str) if it can't be read.
        """
        try:
            if not path.exists():
                return Err(f"File not found: {path}")
            # newline="" keeps \r\n documents byte-identical on write back
            with path.open(encoding="utf-8", newline="") as handle:
                return Ok(handle.read())
        except UnicodeDecodeError:
            return Err(f"Not a UTF-8 text file: {path}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

    def write_text(self, path: Path, content: str) -> Result[None, str]:
        """Replace a text file atomically.

        The content is written to a sibling temporary file which is then
        renamed over ``path``, so a failed write leaves the old file intact.
        """
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            os.replace(tmp_name, path)
            tmp_name = None
            return Ok(None)
        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            return Err(f"Error writing {path}: {e}")
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def load_json(self, path: Path) -> Result[dict[str, Any], str]:
        """Load a JSON object from a file.

        Returns:
            Ok(dict) if successful, Err(str) with error message if failed.
        """
        text = self.read_text(path)
        if isinstance(text, Err):
            return text
        try:
            data = json.loads(text.value)
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        if not isinstance(data, dict):
            return Err(f"Expected a JSON object in {path}")
        return Ok(data)

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 2,
    ) -> Result[None, str]:
        """Save a dictionary as JSON.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        try:
            content = json.dumps(data, indent=indent)
        except TypeError as e:
            return Err(f"Data not JSON serializable: {e}")
        return self.write_text(path, content + "\n")
