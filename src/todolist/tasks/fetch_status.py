# src/todolist/tasks/fetch_status.py

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

_KEY = "has_fetched_data"


class FetchStatusStore:
    """
    Persisted "initial sync done" flag.

    - get/set are synchronous; the value is cached in memory after the first read
    - the file is a tiny JSON document written atomically (tmp + os.replace)
    - a missing or unreadable file reads as False (next launch re-bootstraps)
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._value: bool | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> bool:
        if not self._path.exists():
            return False
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Unreadable fetch status file %s; treating as not fetched", self._path)
            return False
        if not isinstance(data, dict):
            return False
        return bool(data.get(_KEY, False))

    def get_fetch_status(self) -> bool:
        with self._lock:
            if self._value is None:
                self._value = self._load()
            return self._value

    def set_fetch_status(self, value: bool) -> None:
        value = bool(value)
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps({_KEY: value}), "utf-8")
            os.replace(tmp, self._path)
            self._value = value
        logger.info("Fetch status set to %s (%s)", value, self._path)
