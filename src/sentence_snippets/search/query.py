"""
Query Processing

Turns a raw query into the short list of index terms used for ranking.
"""

from sentence_snippets.analyzer import normalize_term
from sentence_snippets.errors import EmptyQueryError
from sentence_snippets.search.indexer import SentenceIndex


class QueryProcessor:
    def __init__(self, index: SentenceIndex):
        self.index = index

    def tokenize(self, query: str) -> list[str]:
        """
        Split a query into known terms.

        Unknown, empty and non-alphanumeric words are dropped, and a repeated
        word is kept once. The result may be empty.

        Raises:
            EmptyQueryError: If the query is empty or only whitespace
        """
        if not query or not query.strip():
            raise EmptyQueryError("query is empty")

        tokens: list[str] = []
        for raw in query.split():
            term = normalize_term(raw)
            if term is None or term not in self.index:
                continue
            if term not in tokens:
                tokens.append(term)
        return tokens

    def sort_and_truncate(self, tokens: list[str], max_count: int) -> list[str]:
        """Keep the ``max_count`` rarest terms, rarest first."""
        ranked = sorted(tokens, key=lambda t: self.index.occurrences[t])
        return ranked[:max_count]
