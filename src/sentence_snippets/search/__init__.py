"""Sentence-granular snippet search."""

from sentence_snippets.search.indexer import (
    SentenceIndex,
    SentenceIndexer,
    TermPostings,
    build_index,
)
from sentence_snippets.search.query import QueryProcessor
from sentence_snippets.search.scoring import SentenceScorer, SentenceWeighingResult
from sentence_snippets.search.searcher import (
    SnippetEngine,
    build,
    find_candidates,
    query_snippet,
)
from sentence_snippets.search.snippet import SnippetResult, assemble_snippet

__all__ = [
    "SentenceIndex",
    "SentenceIndexer",
    "TermPostings",
    "build_index",
    "QueryProcessor",
    "SentenceScorer",
    "SentenceWeighingResult",
    "SnippetEngine",
    "build",
    "find_candidates",
    "query_snippet",
    "SnippetResult",
    "assemble_snippet",
]
