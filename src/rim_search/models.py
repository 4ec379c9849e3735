"""Searchable entities living on maps and on the world."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rim_search.game_state import GameMap


class ThingKind(str, Enum):
    """Closed set of thing kinds; predicates dispatch on this tag."""

    ITEM = "item"
    PAWN = "pawn"
    BUILDING = "building"
    PLANT = "plant"
    CORPSE = "corpse"


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    z: int


@dataclass(frozen=True, slots=True)
class Faction:
    name: str
    is_player: bool = False


@dataclass(slots=True, eq=False)
class Thing:
    """A physical object placed on a map.

    Equality and hashing are by identity so that result sets hold each
    entity once no matter how its fields compare.
    """

    id: str
    label: str
    kind: ThingKind = ThingKind.ITEM
    position: Position = Position(0, 0)
    haulable: bool = False
    description: str | None = None
    map_held: GameMap | None = field(default=None, repr=False)

    @property
    def is_pawn(self) -> bool:
        return self.kind is ThingKind.PAWN

    @property
    def is_haulable(self) -> bool:
        return self.haulable and not self.is_pawn

    @property
    def in_container_enclosed(self) -> bool:
        return False

    @property
    def label_cap(self) -> str:
        return self.label[:1].upper() + self.label[1:]


@dataclass(slots=True, eq=False)
class Pawn(Thing):
    """A mobile actor. Matches on its kind labels as well as its own label."""

    kind_label: str = ""
    kind_def_label: str = ""
    faction: Faction | None = None
    enclosed_in_container: bool = False

    def __post_init__(self) -> None:
        self.kind = ThingKind.PAWN
        self.haulable = False

    @property
    def in_container_enclosed(self) -> bool:
        return self.enclosed_in_container

    @property
    def is_colonist(self) -> bool:
        return self.faction is not None and self.faction.is_player


@dataclass(slots=True, eq=False)
class WorldObject:
    """A location on the world map (settlement, site, caravan...)."""

    id: str
    label: str
    tile: int
    description: str | None = None

    @property
    def label_cap(self) -> str:
        return self.label[:1].upper() + self.label[1:]
