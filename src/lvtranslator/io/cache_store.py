"""JSON file store - key/value persistence for exported cache blobs."""

import re
from pathlib import Path
from typing import Optional

CACHE_STORAGE_KEY = "lvt_cache"

_VALID_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStore:
    """
    Local-storage style persistence backed by a directory.

    Each key maps to `<directory>/<key>.json`. The store treats values as
    opaque strings; callers decide what they contain (e.g. the output of
    TranslationCache.export()).

    I/O failures are reported and turned into False/None so that losing
    persisted data never breaks translation.
    """

    SUFFIX = ".json"

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def save(self, key: str, blob: str) -> bool:
        """Write blob under key, replacing any previous value."""
        path = self._path_for(key)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(blob, encoding="utf-8")
            tmp_path.replace(path)
            return True
        except OSError as e:
            print(f"[STORE] Error writing {path}: {e}")
            return False

    def load(self, key: str) -> Optional[str]:
        """Read the blob stored under key, or None if missing/unreadable."""
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"[STORE] Error reading {path}: {e}")
            return None

    def remove(self, key: str) -> None:
        path = self._path_for(key)
        if path.exists():
            try:
                path.unlink()
            except OSError as e:
                print(f"[STORE] Error deleting {path}: {e}")

    def keys(self) -> list[str]:
        """List stored keys."""
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob(f"*{self.SUFFIX}"))

    def _path_for(self, key: str) -> Path:
        if not _VALID_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}{self.SUFFIX}"
