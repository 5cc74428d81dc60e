"""
Snippet Assembly

Joins the chosen sentences back together in document order.
"""

from dataclasses import dataclass

from sentence_snippets.search.indexer import SentenceIndex
from sentence_snippets.search.scoring import SentenceWeighingResult


@dataclass
class SnippetResult:
    """Outcome of one snippet query."""

    query: str
    tokens: list[str]
    sentences: list[SentenceWeighingResult]  # Document order
    text: str

    @property
    def found(self) -> bool:
        return bool(self.sentences)


def in_document_order(
    results: list[SentenceWeighingResult],
) -> list[SentenceWeighingResult]:
    return sorted(results, key=lambda r: r.sentence_number)


def assemble_snippet(
    index: SentenceIndex,
    results: list[SentenceWeighingResult],
    separator: str = " ... ",
) -> str:
    """
    Build the snippet text.

    Args:
        index: Index the results were scored against
        results: Selected sentences, in any order
        separator: String placed between consecutive sentences

    Returns:
        Sentence texts in document order joined by ``separator``
    """
    return separator.join(
        index.sentence_text(r.sentence_number) for r in in_document_order(results)
    )
