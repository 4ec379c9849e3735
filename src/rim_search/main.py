"""CLI entrypoint for RimSearch."""

from __future__ import annotations

import dataclasses
import logging

import typer
from rich import print
from rich.table import Table

from rim_search.config import settings
from rim_search.demo import build_demo_snapshot
from rim_search.models import Thing
from rim_search.query import QueryEngine, QueryParser, SearchResults, compile_query
from rim_search.settings_store import DefaultTermStore

app = typer.Typer(help="RimSearch query engine")


def _build_engine() -> QueryEngine:
    return QueryEngine(QueryParser(enable_world_flag=settings.world_flag_enabled))


def _where(thing: Thing) -> str:
    map_id = thing.map_held.id if thing.map_held else "?"
    return f"{map_id} ({thing.position.x}, {thing.position.z})"


def _results_table(results: SearchResults) -> Table:
    table = Table(title=f"{results.total} result(s)")
    table.add_column("kind")
    table.add_column("label")
    table.add_column("where")
    table.add_column("description")
    for pawn in sorted(results.pawns, key=lambda p: p.label):
        table.add_row("pawn", pawn.label_cap, _where(pawn), pawn.description or "")
    for thing in sorted(results.things, key=lambda t: t.label):
        table.add_row("thing", thing.label_cap, _where(thing), thing.description or "")
    for world_object in sorted(results.world_objects, key=lambda w: w.label):
        table.add_row("world", world_object.label_cap, f"tile {world_object.tile}", world_object.description or "")
    return table


@app.callback()
def _configure_logging() -> None:
    logging.basicConfig(level=settings.log_level.upper())


@app.command("config")
def show_config() -> None:
    """Show effective runtime configuration."""
    print(settings.model_dump(mode="json"))


@app.command()
def parse(term: str) -> None:
    """Show the flags, label and predicate chains a search term compiles to."""
    query = _build_engine().parser.parse(term)
    compiled = compile_query(query)
    print({"query": dataclasses.asdict(query), "predicates": compiled.describe()})


@app.command()
def search(
    term: str,
    world: bool = typer.Option(False, help="Also search world-map locations"),
) -> None:
    """Run a search term against the built-in demo colony."""
    engine = _build_engine()
    query = engine.parser.parse(term)
    if world:
        query = dataclasses.replace(query, world_map=True)

    results = engine.evaluate(compile_query(query), build_demo_snapshot())
    if results.is_empty:
        print({"results": [], "label": query.debug_label})
        raise typer.Exit(code=1)
    print(_results_table(results))


@app.command("default-term")
def default_term(term: str = typer.Argument(None, help="New default search term")) -> None:
    """Show or persist the default search term."""
    store = DefaultTermStore(settings.settings_file)
    if term is not None:
        store.save(term)
    print({"default_search_term": store.load(), "path": str(store.path)})


if __name__ == "__main__":
    app()
