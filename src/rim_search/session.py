"""Debounced search session driven by the host's per-frame ticks."""

from __future__ import annotations

import logging

from rim_search.config import settings
from rim_search.game_state import QueryContext
from rim_search.query import QueryEngine, SearchResults
from rim_search.settings_store import DefaultTermStore


class SearchSession:
    """Holds the term being typed and reruns the search once edits go quiet.

    The host calls :meth:`edit` with the text field's contents every frame and
    :meth:`tick` once per frame. A search runs after ``debounce_ticks`` ticks
    without a change; every run replaces :attr:`results` wholesale. Unset
    arguments fall back to ``settings``.
    """

    def __init__(
        self,
        engine: QueryEngine,
        context: QueryContext,
        *,
        initial_term: str | None = None,
        debounce_ticks: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if debounce_ticks is None:
            debounce_ticks = settings.debounce_ticks
        if debounce_ticks < 1:
            raise ValueError(f"debounce_ticks must be at least 1, got {debounce_ticks}")

        self._engine = engine
        self._context = context
        self._term = settings.default_search_term if initial_term is None else initial_term
        self._debounce_ticks = debounce_ticks
        self._logger = logger or logging.getLogger("rim_search.session")

        self._dirty = False
        self._ticks_since_edit = 0
        self.results: SearchResults | None = None

    @classmethod
    def from_settings(
        cls,
        engine: QueryEngine,
        context: QueryContext,
        *,
        store: DefaultTermStore | None = None,
        logger: logging.Logger | None = None,
    ) -> SearchSession:
        """Start a session seeded with the persisted default search term."""
        store = store or DefaultTermStore(settings.settings_file)
        return cls(engine, context, initial_term=store.load(), logger=logger)

    @property
    def term(self) -> str:
        return self._term

    @property
    def debounce_ticks(self) -> int:
        return self._debounce_ticks

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def ticks_since_edit(self) -> int:
        return self._ticks_since_edit

    def edit(self, term: str) -> None:
        if term == self._term:
            return
        self._term = term
        self._dirty = True
        self._ticks_since_edit = 0

    def tick(self) -> bool:
        """Advance the debounce timer; return True when a search ran."""
        if not self._dirty:
            return False

        self._ticks_since_edit += 1
        if self._ticks_since_edit < self._debounce_ticks:
            return False

        self._run("debounce")
        return True

    def submit(self) -> SearchResults:
        """Search right away, skipping whatever is left of the debounce wait."""
        return self._run("submit")

    def _run(self, trigger: str) -> SearchResults:
        self._dirty = False
        self.results = self._engine.search(self._term, self._context)
        self._logger.info(
            "session_search_triggered",
            extra={"trigger": trigger, "term": self._term, "result_count": self.results.total},
        )
        return self.results
