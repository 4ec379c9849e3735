from __future__ import annotations

from pathlib import Path

from rim_search.settings_store import DefaultTermStore


def test_missing_file_falls_back_to_default(tmp_path: Path) -> None:
    store = DefaultTermStore(tmp_path / "missing.json")

    assert store.load() == "-."


def test_save_then_load(tmp_path: Path) -> None:
    store = DefaultTermStore(tmp_path / "nested" / "settings.json")

    store.save("!-#")

    assert store.load() == "!-#"
    assert DefaultTermStore(store.path).load() == "!-#"


def test_corrupt_file_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    assert DefaultTermStore(path, fallback="*").load() == "*"
