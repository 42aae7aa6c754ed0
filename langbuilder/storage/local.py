"""Local key-value storage: one JSON document per key."""

import os
import tempfile
from pathlib import Path
from typing import Optional


class LocalStorage:
    """String key-value store backed by files in a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _get_path(self, key: str) -> Path:
        """Get file path for a key."""
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        """Get the stored text for a key, or None if absent."""
        path = self._get_path(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def set_item(self, key: str, value: str) -> None:
        """Overwrite the stored text for a key."""
        fd, tmp = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, self._get_path(key))
        except Exception:
            Path(tmp).unlink(missing_ok=True)
            raise
