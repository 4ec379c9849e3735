"""Deterministic demo colony used by the CLI."""

from __future__ import annotations

from rim_search.game_state import GameMap, GameSnapshot, World
from rim_search.models import Faction, Pawn, Position, Thing, ThingKind, WorldObject

PLAYER = Faction("New Arbor", is_player=True)
PIRATES = Faction("Red Fang pirates")


def build_demo_snapshot() -> GameSnapshot:
    home = GameMap("home", fogged_cells={Position(90, 90)})
    home.spawn_all(
        [
            Pawn("pawn-joe", "Trader Joe", position=Position(10, 12), kind_label="colonist",
                 kind_def_label="colonist", faction=PLAYER, description="Trade lead"),
            Pawn("pawn-ada", "Ada", position=Position(14, 8), kind_label="doctor",
                 kind_def_label="colonist", faction=PLAYER),
            Pawn("pawn-sleeper", "Sleeper", position=Position(3, 3), kind_label="colonist",
                 kind_def_label="colonist", faction=PLAYER, enclosed_in_container=True),
            Pawn("pawn-husky", "Husky", position=Position(20, 4), kind_label="husky",
                 kind_def_label="husky"),
            Pawn("pawn-raider", "Grim", position=Position(90, 90), kind_label="pirate gunner",
                 kind_def_label="pirate", faction=PIRATES),
            Thing("thing-steel", "steel chunk", position=Position(11, 11), haulable=True,
                  description="Scrap steel"),
            Thing("thing-meal", "simple meal x4", position=Position(12, 11), haulable=True),
            Thing("thing-gold", "gold x12", position=Position(90, 90), haulable=True),
            Thing("thing-wall", "granite wall", kind=ThingKind.BUILDING, position=Position(9, 9)),
        ]
    )

    outpost = GameMap("outpost")
    outpost.spawn_all(
        [
            Pawn("pawn-mira", "Mira", position=Position(5, 5), kind_label="colonist",
                 kind_def_label="colonist", faction=PLAYER),
            Thing("thing-jade", "jade x30", position=Position(6, 5), haulable=True),
        ]
    )

    world = World(
        [
            WorldObject("wo-home", "New Arbor", tile=1204, description="Player colony"),
            WorldObject("wo-outpost", "Kestrel outpost", tile=1310),
            WorldObject("wo-pirates", "Red Fang camp", tile=877),
        ]
    )
    return GameSnapshot([home, outpost], current_map=home, world=world)
