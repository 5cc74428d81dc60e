"""
Snippet Search Engine

Answers free-text queries with the most relevant sentences of one document.
"""

import logging

from sentence_snippets.core.config import SnippetConfig
from sentence_snippets.errors import EmptyQueryError
from sentence_snippets.i18n.messages import get_message
from sentence_snippets.loader import load_document
from sentence_snippets.search.indexer import SentenceIndex, build_index
from sentence_snippets.search.query import QueryProcessor
from sentence_snippets.search.scoring import SentenceScorer, top_k
from sentence_snippets.search.snippet import (
    SnippetResult,
    assemble_snippet,
    in_document_order,
)

logger = logging.getLogger(__name__)


def find_candidates(
    index: SentenceIndex,
    tokens: list[str],
    per_token_limit: int,
) -> set[int]:
    """
    Collect the sentences worth scoring.

    Only the first ``per_token_limit`` postings of each token are read, so the
    result never exceeds ``len(tokens) * per_token_limit`` sentences.
    """
    candidates: set[int] = set()
    for token in tokens:
        postings = index.postings.get(token)
        if postings is None:
            continue
        candidates.update(int(s) for s in postings.sentences[:per_token_limit])
    return candidates


class SnippetEngine:
    """
    Query front for a built SentenceIndex.

    The index is never modified here, so one engine can serve any number of
    queries, from any number of threads.
    """

    def __init__(
        self,
        index: SentenceIndex,
        config: SnippetConfig | None = None,
        language: str | None = None,
    ):
        self.index = index
        self.config = config or SnippetConfig()
        self.language = language
        self.query_processor = QueryProcessor(index)
        self.scorer = SentenceScorer(index, self.config)

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "SnippetEngine":
        return cls(build_index(text), **kwargs)

    @classmethod
    def from_file(
        cls, path: str, encoding: str | None = None, **kwargs
    ) -> "SnippetEngine":
        """
        Load, index and wrap a document.

        Raises:
            DocumentLoadError: If the file cannot be read or decoded
        """
        return cls.from_text(load_document(path, encoding=encoding), **kwargs)

    def search(self, query: str) -> SnippetResult:
        """
        Rank sentences for ``query``.

        Returns:
            SnippetResult whose text is either the snippet or a fixed message
        """
        try:
            tokens = self.query_processor.tokenize(query)
        except EmptyQueryError:
            return self._message_result(query, [], "empty_query")

        tokens = self.query_processor.sort_and_truncate(tokens, self.config.max_tokens)
        if not tokens:
            return self._message_result(query, tokens, "no_results")

        candidates = find_candidates(
            self.index, tokens, self.config.candidates_per_token
        )
        logger.debug(f"Query {query!r}: tokens={tokens} candidates={len(candidates)}")
        if not candidates:
            return self._message_result(query, tokens, "no_results")

        scored = self.scorer.score_batch(candidates, tokens)
        best = in_document_order(top_k(scored, self.config.max_sentences))

        return SnippetResult(
            query=query,
            tokens=tokens,
            sentences=best,
            text=assemble_snippet(self.index, best, self.config.separator),
        )

    def get_snippet(self, query: str) -> str:
        return self.search(query).text

    def _message_result(self, query: str, tokens: list[str], key: str) -> SnippetResult:
        return SnippetResult(
            query=query,
            tokens=tokens,
            sentences=[],
            text=get_message(key, self.language),
        )


def build(document_text: str) -> SentenceIndex:
    """Index a decoded document."""
    return build_index(document_text)


def query_snippet(
    index: SentenceIndex,
    query: str,
    config: SnippetConfig | None = None,
    language: str | None = None,
) -> str:
    """Snippet (or fixed message) for ``query`` against ``index``."""
    return SnippetEngine(index, config=config, language=language).get_snippet(query)
