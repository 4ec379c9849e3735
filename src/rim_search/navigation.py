"""Jump-to and select actions the results view performs on a chosen entity."""

from __future__ import annotations

from typing import Protocol

from rim_search.game_state import GameMap
from rim_search.models import Position, Thing, WorldObject
from rim_search.query import SearchResults


class NavigationError(RuntimeError):
    """Raised when an entity has no map to navigate to."""


class ViewController(Protocol):
    """Camera and selection surface of the game view."""

    current_map: GameMap | None

    def jump_to_cell(self, position: Position) -> None: ...

    def show_world(self) -> None: ...

    def jump_to_tile(self, tile: int) -> None: ...

    def select(self, entity: Thing | WorldObject) -> None: ...


def jump_to_thing(view: ViewController, thing: Thing) -> None:
    """Make the thing's map current, centre the camera on it and select it."""
    game_map = thing.map_held
    if game_map is None:
        raise NavigationError(f"{thing.label_cap} is not on any map")

    if view.current_map is not game_map:
        view.current_map = game_map
    view.jump_to_cell(thing.position)
    view.select(thing)


def jump_to_world_object(view: ViewController, world_object: WorldObject) -> None:
    view.show_world()
    view.jump_to_tile(world_object.tile)


def select_all(view: ViewController, results: SearchResults) -> int:
    """Select every result; returns how many entities were selected."""
    selected = 0
    for entity in (*results.pawns, *results.things, *results.world_objects):
        view.select(entity)
        selected += 1
    return selected
