"""Named predicate variants and the short-circuit chain runner.

Each predicate is a frozen value: the label it matches against is a field,
not a captured closure, so a compiled chain can be inspected and compared.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol, Sequence, TypeVar

from rim_search.models import Thing, WorldObject

T_contra = TypeVar("T_contra", contravariant=True)
T = TypeVar("T")


class Predicate(Protocol[T_contra]):
    name: ClassVar[str]

    def __call__(self, candidate: T_contra) -> bool: ...


@dataclass(frozen=True, slots=True)
class Visible:
    """Rejects things on fogged cells so a search never reveals hidden state."""

    name: ClassVar[str] = "visible"

    def __call__(self, thing: Thing) -> bool:
        game_map = thing.map_held
        if game_map is None:
            return True
        return not game_map.is_fogged(thing.position)


@dataclass(frozen=True, slots=True)
class LabelMatch:
    """Case-insensitive substring match on a thing's labels."""

    text: str
    name: ClassVar[str] = "label_match"

    def __call__(self, thing: Thing) -> bool:
        needle = self.text.lower()
        if thing.is_pawn:
            if needle in thing.kind_label.lower():  # type: ignore[attr-defined]
                return True
            if needle in thing.kind_def_label.lower():  # type: ignore[attr-defined]
                return True
        return needle in thing.label.lower()


@dataclass(frozen=True, slots=True)
class ColonyOnly:
    name: ClassVar[str] = "colony_only"

    def __call__(self, thing: Thing) -> bool:
        if thing.is_pawn:
            return thing.is_colonist  # type: ignore[attr-defined]
        return True


@dataclass(frozen=True, slots=True)
class NotContained:
    name: ClassVar[str] = "not_contained"

    def __call__(self, thing: Thing) -> bool:
        if thing.is_pawn:
            return not thing.in_container_enclosed
        return True


@dataclass(frozen=True, slots=True)
class AlwaysTrue:
    name: ClassVar[str] = "always_true"

    def __call__(self, world_object: WorldObject) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class WorldLabelMatch:
    """Case-sensitive substring match on a world object's label.

    Unlike LabelMatch this does not lower-case either side.
    """

    text: str
    name: ClassVar[str] = "world_label_match"

    def __call__(self, world_object: WorldObject) -> bool:
        return self.text in world_object.label


ThingPredicate = Visible | LabelMatch | ColonyOnly | NotContained
WorldObjectPredicate = AlwaysTrue | WorldLabelMatch


def run_chain(predicates: Sequence[Predicate[T]], candidate: T) -> bool:
    """Evaluate predicates in order, stopping at the first failure.

    The candidate is accepted only when every predicate held.
    """
    fulfilled = 0
    for predicate in predicates:
        if not predicate(candidate):
            break
        fulfilled += 1
    return fulfilled >= len(predicates)
