"""Search-term parsing, predicate compilation and evaluation."""

from .compiler import CompiledPredicates, compile_query
from .engine import QueryEngine, SearchResults
from .parser import FLAG_CHARS, ParsedQuery, QueryParser, SearchFlag, parse_query
from .predicates import AlwaysTrue, ColonyOnly, LabelMatch, NotContained, Visible, WorldLabelMatch, run_chain

__all__ = [
    "FLAG_CHARS",
    "AlwaysTrue",
    "ColonyOnly",
    "CompiledPredicates",
    "LabelMatch",
    "NotContained",
    "ParsedQuery",
    "QueryEngine",
    "QueryParser",
    "SearchFlag",
    "SearchResults",
    "Visible",
    "WorldLabelMatch",
    "compile_query",
    "parse_query",
    "run_chain",
]
