import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

from ..errors import StorageCorruptError

log = logging.getLogger(__name__)


class JsonStore:
    """Simple JSON-on-disk collections: one file per collection, each an array."""

    def __init__(self, data_dir: Path, indent: int = 4):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.indent = indent

    def _path(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def load(self, collection: str) -> List[Dict[str, Any]]:
        p = self._path(collection)
        if not p.exists():
            return []
        raw = p.read_text(encoding="utf-8")
        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            log.error("Could not parse %s: %s", p, e)
            raise StorageCorruptError(collection, str(e)) from e
        if not isinstance(data, list):
            log.error("Expected a JSON array in %s, got %s", p, type(data).__name__)
            raise StorageCorruptError(collection, "expected a JSON array")
        return data

    def save(self, collection: str, records: List[Dict[str, Any]]):
        """Overwrite the whole collection file with ``records``.

        Every save gets its own temp file in the data dir; concurrent saves
        to one collection leave whichever replaced the file last.
        """
        if not isinstance(records, list):
            raise TypeError("records must be a list")
        p = self._path(collection)
        f = tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.data_dir, prefix=f".{collection}.", suffix=".tmp", delete=False
        )
        tmp = Path(f.name)
        try:
            with f:
                json.dump(records, f, indent=self.indent, ensure_ascii=False, allow_nan=False)
            os.replace(tmp, p)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
