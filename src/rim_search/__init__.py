"""RimSearch: flag-prefixed search over things, pawns and world locations."""

from .query import ParsedQuery, QueryEngine, QueryParser, SearchResults, compile_query, parse_query

__all__ = ["ParsedQuery", "QueryEngine", "QueryParser", "SearchResults", "compile_query", "parse_query"]
