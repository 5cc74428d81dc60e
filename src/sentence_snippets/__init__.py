"""Single-document sentence snippet engine."""

from sentence_snippets.errors import DocumentLoadError, EmptyQueryError, SnippetError
from sentence_snippets.search import SnippetEngine, build, query_snippet

__version__ = "0.1.0"
__all__ = [
    "DocumentLoadError",
    "EmptyQueryError",
    "SnippetError",
    "SnippetEngine",
    "build",
    "query_snippet",
]
