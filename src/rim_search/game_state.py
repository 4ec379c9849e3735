"""Read-only game state that queries are evaluated against."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Protocol, Sequence

from rim_search.models import Pawn, Position, Thing, WorldObject


class ThingRequestGroup(str, Enum):
    """Named subsets a map can enumerate without a full scan."""

    HAULABLE_EVER = "haulable_ever"


@dataclass(slots=True, eq=False)
class GameMap:
    """A bounded local area holding spawned things and pawns."""

    id: str
    fogged_cells: set[Position] = field(default_factory=set)
    _things: list[Thing] = field(default_factory=list, init=False, repr=False)

    def spawn(self, thing: Thing) -> Thing:
        thing.map_held = self
        self._things.append(thing)
        return thing

    def spawn_all(self, things: Iterable[Thing]) -> None:
        for thing in things:
            self.spawn(thing)

    def is_fogged(self, position: Position) -> bool:
        return position in self.fogged_cells

    def all_pawns(self) -> Iterator[Pawn]:
        for thing in self._things:
            if thing.is_pawn:
                yield thing  # type: ignore[misc]

    def things_in_group(self, group: ThingRequestGroup) -> Iterator[Thing]:
        for thing in self._things:
            if thing.is_haulable:
                yield thing


@dataclass(slots=True)
class World:
    all_world_objects: list[WorldObject] = field(default_factory=list)


class QueryContext(Protocol):
    """Snapshot of the collections a query may reach. Never mutated by queries."""

    @property
    def maps(self) -> Sequence[GameMap]: ...

    @property
    def current_map(self) -> GameMap | None: ...

    @property
    def world(self) -> World: ...


class GameSnapshot:
    """In-memory game state: loaded maps, the visible map and the world."""

    def __init__(
        self,
        maps: Sequence[GameMap] = (),
        *,
        current_map: GameMap | None = None,
        world: World | None = None,
    ) -> None:
        self._maps = list(maps)
        self._current_map = current_map if current_map is not None else (self._maps[0] if self._maps else None)
        self._world = world or World()
        self.world_view_active = False

    @property
    def maps(self) -> Sequence[GameMap]:
        return tuple(self._maps)

    @property
    def current_map(self) -> GameMap | None:
        return self._current_map

    @current_map.setter
    def current_map(self, game_map: GameMap | None) -> None:
        if game_map is not None and game_map not in self._maps:
            raise ValueError(f"Map is not loaded: {game_map.id}")
        self._current_map = game_map
        self.world_view_active = False

    @property
    def world(self) -> World:
        return self._world

    def show_world(self) -> None:
        self.world_view_active = True
