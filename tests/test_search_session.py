from __future__ import annotations

import pytest

from rim_search.game_state import GameMap, GameSnapshot
from rim_search.models import Pawn
from rim_search.query import QueryEngine
from rim_search.session import SearchSession


class CountingEngine(QueryEngine):
    def __init__(self) -> None:
        super().__init__()
        self.terms: list[str] = []

    def search(self, raw, context):
        self.terms.append(raw)
        return super().search(raw, context)


def _session(debounce_ticks: int = 3) -> tuple[SearchSession, CountingEngine]:
    game_map = GameMap("home")
    game_map.spawn(Pawn("joe", "Joe"))
    engine = CountingEngine()
    session = SearchSession(engine, GameSnapshot([game_map]), initial_term="-.", debounce_ticks=debounce_ticks)
    return session, engine


def test_search_runs_only_after_quiet_period() -> None:
    session, engine = _session()

    session.edit("-jo")
    assert session.tick() is False
    assert session.tick() is False
    assert session.tick() is True

    assert engine.terms == ["-jo"]
    assert session.results is not None
    assert {pawn.id for pawn in session.results.pawns} == {"joe"}
    assert session.dirty is False


def test_new_edit_resets_timer() -> None:
    session, engine = _session()

    session.edit("-j")
    session.tick()
    session.tick()
    session.edit("-jo")
    assert session.ticks_since_edit == 0
    session.tick()
    session.tick()

    assert engine.terms == []
    assert session.tick() is True
    assert engine.terms == ["-jo"]


def test_unchanged_text_does_not_mark_dirty() -> None:
    session, engine = _session(debounce_ticks=1)

    session.edit("-.")

    assert session.dirty is False
    assert session.tick() is False
    assert session.results is None
    assert engine.terms == []


def test_submit_skips_debounce_and_replaces_results() -> None:
    session, engine = _session()

    first = session.submit()
    session.edit("-nobody")
    second = session.submit()

    assert engine.terms == ["-.", "-nobody"]
    assert first is not second
    assert session.results is second
    assert second.is_empty
    assert session.tick() is False


def test_defaults_come_from_settings(monkeypatch) -> None:
    from rim_search import session as session_module

    monkeypatch.setattr(session_module.settings, "debounce_ticks", 2)
    monkeypatch.setattr(session_module.settings, "default_search_term", "!-")

    session = SearchSession(QueryEngine(), GameSnapshot())

    assert session.debounce_ticks == 2
    assert session.term == "!-"


def test_from_settings_seeds_persisted_default_term(tmp_path, monkeypatch) -> None:
    from rim_search import session as session_module
    from rim_search.settings_store import DefaultTermStore

    settings_file = tmp_path / "settings.json"
    DefaultTermStore(settings_file).save("-#joe")
    monkeypatch.setattr(session_module.settings, "settings_file", settings_file)
    monkeypatch.setattr(session_module.settings, "debounce_ticks", 5)

    session = SearchSession.from_settings(QueryEngine(), GameSnapshot())

    assert session.term == "-#joe"
    assert session.debounce_ticks == 5
    assert session.dirty is False


def test_from_settings_without_saved_term_uses_default(tmp_path, monkeypatch) -> None:
    from rim_search import session as session_module

    monkeypatch.setattr(session_module.settings, "settings_file", tmp_path / "missing.json")
    monkeypatch.setattr(session_module.settings, "default_search_term", "-.")

    assert SearchSession.from_settings(QueryEngine(), GameSnapshot()).term == "-."


@pytest.mark.parametrize("ticks", [0, -3])
def test_invalid_debounce_is_rejected(ticks: int) -> None:
    with pytest.raises(ValueError):
        SearchSession(QueryEngine(), GameSnapshot(), debounce_ticks=ticks)
