from __future__ import annotations

import pytest

from rim_search.query import ParsedQuery, QueryParser, SearchFlag, parse_query


def test_leading_flags_are_consumed_and_rest_is_label() -> None:
    query = parse_query("-.foo")

    assert query.pawns is True
    assert query.items is True
    assert query.all_maps is False
    assert query.label == "foo"
    assert query.debug_label == "foo"


def test_flag_characters_after_label_starts_are_literal() -> None:
    query = parse_query("foo-.")

    assert query.flags == frozenset()
    assert query.label == "foo-."


def test_match_all_alone_has_empty_label() -> None:
    query = parse_query("*")

    assert query.match_all is True
    assert query.label == ""


def test_every_flag_character_maps_to_one_flag() -> None:
    query = parse_query("!-#.*")

    assert query.flags == {
        SearchFlag.ALL_MAPS,
        SearchFlag.PAWNS,
        SearchFlag.COLONY_ONLY,
        SearchFlag.ITEMS,
        SearchFlag.MATCH_ALL,
    }
    assert query.world_map is False
    assert query.label == ""


def test_flag_order_does_not_matter() -> None:
    assert parse_query("#-!x").flags == parse_query("!#-x").flags


def test_label_keeps_case_and_whitespace() -> None:
    query = parse_query("- Trader  Joe ")

    assert query.pawns is True
    assert query.label == " Trader  Joe "


@pytest.mark.parametrize("raw", ["", "   ", "\t", "ünïcødé", "<<<", "----"])
def test_parse_never_fails(raw: str) -> None:
    query = parse_query(raw)

    assert isinstance(query, ParsedQuery)
    assert query.raw == raw


def test_world_flag_disabled_by_default() -> None:
    query = QueryParser().parse("<camp")

    assert query.world_map is False
    assert query.label == "<camp"


def test_world_flag_can_be_enabled() -> None:
    query = QueryParser(enable_world_flag=True).parse("<!camp")

    assert query.world_map is True
    assert query.all_maps is True
    assert query.label == "camp"
