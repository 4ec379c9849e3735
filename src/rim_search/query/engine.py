"""Query evaluation over the maps and world of a game state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from rim_search.game_state import GameMap, QueryContext, ThingRequestGroup
from rim_search.models import Pawn, Thing, WorldObject
from rim_search.query.compiler import CompiledPredicates, compile_query
from rim_search.query.parser import QueryParser
from rim_search.query.predicates import run_chain


@dataclass(slots=True)
class SearchResults:
    """Matches of one evaluation, split by entity kind."""

    things: set[Thing] = field(default_factory=set)
    pawns: set[Pawn] = field(default_factory=set)
    world_objects: set[WorldObject] = field(default_factory=set)

    @property
    def total(self) -> int:
        return len(self.things) + len(self.pawns) + len(self.world_objects)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


class QueryEngine:
    """Parses, compiles and evaluates search terms against a query context."""

    def __init__(self, parser: QueryParser | None = None, *, logger: logging.Logger | None = None) -> None:
        self._parser = parser or QueryParser()
        self._logger = logger or logging.getLogger("rim_search.query.engine")

    @property
    def parser(self) -> QueryParser:
        return self._parser

    def compile(self, raw: str) -> CompiledPredicates:
        return compile_query(self._parser.parse(raw))

    def search(self, raw: str, context: QueryContext) -> SearchResults:
        """Parse, compile and evaluate ``raw`` in one synchronous call."""
        return self.evaluate(self.compile(raw), context)

    def evaluate(self, compiled: CompiledPredicates, context: QueryContext) -> SearchResults:
        query = compiled.query
        results = SearchResults()

        for game_map in self._selected_maps(compiled, context):
            if query.pawns:
                self._collect(compiled, game_map.all_pawns(), results.pawns)
            if query.items:
                self._collect(compiled, game_map.things_in_group(ThingRequestGroup.HAULABLE_EVER), results.things)

        if query.world_map:
            for world_object in context.world.all_world_objects:
                if run_chain(compiled.world_objects, world_object):
                    results.world_objects.add(world_object)

        self._logger.debug(
            "query_evaluated",
            extra={
                "raw": query.raw,
                "label": query.debug_label,
                "pawns": len(results.pawns),
                "things": len(results.things),
                "world_objects": len(results.world_objects),
            },
        )
        return results

    @staticmethod
    def _selected_maps(compiled: CompiledPredicates, context: QueryContext) -> list[GameMap]:
        if compiled.query.all_maps:
            return list(context.maps)
        if context.current_map is not None:
            return [context.current_map]
        return []

    @staticmethod
    def _collect(compiled: CompiledPredicates, candidates: Iterable[Thing], into: set) -> None:
        for candidate in candidates:
            if run_chain(compiled.things, candidate):
                into.add(candidate)
