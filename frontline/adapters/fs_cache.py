import os
import re
from pathlib import Path
from threading import Lock

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileSystemCache:
    """One UTF-8 file per cache key under ``base_path``."""

    def __init__(self, base_path: str):
        self.base_path = Path(base_path).resolve()
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)
        self._lock = Lock()

    def _safe_path(self, key: str) -> Path:
        # Keys become file names; reject anything that could escape base_path
        if not _KEY_PATTERN.match(key) or key in (".", ".."):
            raise ValueError(f"Illegal cache key: {key!r}")
        target = (self.base_path / f"{key}.cache").resolve()
        if target.parent != self.base_path:
            raise ValueError(f"Path traversal attempt detected: {key}")
        return target

    def get(self, key: str) -> str | None:
        target = self._safe_path(key)
        with self._lock:
            if not target.exists():
                return None
            return target.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        target = self._safe_path(key)
        tmp = target.with_suffix(".tmp")
        with self._lock:
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, target)

    def has(self, key: str) -> bool:
        return self._safe_path(key).exists()

    def delete(self, key: str) -> None:
        target = self._safe_path(key)
        with self._lock:
            if target.exists():
                os.remove(target)

    def clear(self) -> None:
        with self._lock:
            for entry in self.base_path.glob("*.cache"):
                os.remove(entry)
