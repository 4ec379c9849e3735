"""Persistence for the default search term a new session starts with."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rim_search.config import settings

_KEY = "default_search_term"


class DefaultTermStore:
    """JSON-file store holding the user's default search term."""

    def __init__(
        self,
        file_path: str | Path,
        *,
        fallback: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._path = Path(file_path).expanduser()
        self._fallback = settings.default_search_term if fallback is None else fallback
        self._logger = logger or logging.getLogger("rim_search.settings_store")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str:
        if not self._path.exists():
            return self._fallback

        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            self._logger.warning("default_term_unreadable", extra={"path": str(self._path)})
            return self._fallback

        term = payload.get(_KEY) if isinstance(payload, dict) else None
        if not isinstance(term, str):
            return self._fallback
        return term

    def save(self, term: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps({_KEY: term}) + "\n", encoding="utf-8")
        self._logger.info("default_term_saved", extra={"path": str(self._path), "term": term})
