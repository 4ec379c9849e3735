"""Turns a parsed query into ordered predicate chains."""

from __future__ import annotations

from dataclasses import dataclass

from rim_search.query.parser import ParsedQuery
from rim_search.query.predicates import (
    AlwaysTrue,
    ColonyOnly,
    LabelMatch,
    NotContained,
    ThingPredicate,
    Visible,
    WorldLabelMatch,
    WorldObjectPredicate,
)


@dataclass(frozen=True, slots=True)
class CompiledPredicates:
    query: ParsedQuery
    things: tuple[ThingPredicate, ...]
    world_objects: tuple[WorldObjectPredicate, ...]

    def describe(self) -> dict[str, list[str]]:
        return {
            "things": [predicate.name for predicate in self.things],
            "world_objects": [predicate.name for predicate in self.world_objects],
        }


def compile_query(query: ParsedQuery) -> CompiledPredicates:
    """Build the thing and world-object chains for ``query``.

    Visibility always comes first. ``match_all`` skips every other thing
    predicate and accepts every world object.
    """
    if query.match_all:
        return CompiledPredicates(query=query, things=(Visible(),), world_objects=(AlwaysTrue(),))

    things: list[ThingPredicate] = [Visible()]
    world_objects: list[WorldObjectPredicate] = []

    if query.label:
        things.append(LabelMatch(query.label))
        world_objects.append(WorldLabelMatch(query.label))

    if query.colony_only:
        things.append(ColonyOnly())

    things.append(NotContained())
    return CompiledPredicates(query=query, things=tuple(things), world_objects=tuple(world_objects))
