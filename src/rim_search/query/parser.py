"""Search-term parsing: leading flag characters followed by a free-text label."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SearchFlag(str, Enum):
    ALL_MAPS = "all_maps"
    WORLD_MAP = "world_map"
    PAWNS = "pawns"
    COLONY_ONLY = "colony_only"
    ITEMS = "items"
    MATCH_ALL = "match_all"


FLAG_CHARS: dict[str, SearchFlag] = {
    "!": SearchFlag.ALL_MAPS,
    "-": SearchFlag.PAWNS,
    "#": SearchFlag.COLONY_ONLY,
    ".": SearchFlag.ITEMS,
    "*": SearchFlag.MATCH_ALL,
}
WORLD_FLAG_CHAR = "<"


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """Flags and label extracted from one raw search term."""

    raw: str = ""
    label: str = ""
    all_maps: bool = False
    world_map: bool = False
    pawns: bool = False
    colony_only: bool = False
    items: bool = False
    match_all: bool = False
    debug_label: str = ""

    @property
    def flags(self) -> frozenset[SearchFlag]:
        return frozenset(flag for flag in SearchFlag if getattr(self, flag.value))


class QueryParser:
    """Two-phase scanner: flag characters first, then everything else is label.

    Once the first non-flag character is seen the label phase starts with that
    character and never ends, so ``"foo-."`` is all label.
    """

    def __init__(self, *, enable_world_flag: bool = False) -> None:
        self._flag_chars = dict(FLAG_CHARS)
        if enable_world_flag:
            self._flag_chars[WORLD_FLAG_CHAR] = SearchFlag.WORLD_MAP

    @property
    def flag_chars(self) -> str:
        return "".join(self._flag_chars)

    def parse(self, raw: str) -> ParsedQuery:
        flags: set[SearchFlag] = set()
        label_start = len(raw)
        for index, char in enumerate(raw):
            flag = self._flag_chars.get(char)
            if flag is None:
                label_start = index
                break
            flags.add(flag)

        label = raw[label_start:]
        return ParsedQuery(
            raw=raw,
            label=label,
            debug_label=label,
            **{flag.value: True for flag in flags},
        )


_default_parser = QueryParser()


def parse_query(raw: str) -> ParsedQuery:
    return _default_parser.parse(raw)
