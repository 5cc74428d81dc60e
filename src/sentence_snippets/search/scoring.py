"""
Sentence Scoring

Weighs candidate sentences against the selected query terms.
"""

import math
from dataclasses import dataclass

from sentence_snippets.core.config import SnippetConfig
from sentence_snippets.search.indexer import SentenceIndex


@dataclass(frozen=True)
class SentenceWeighingResult:
    """A scored sentence."""

    term: str | None  # First query term found in the sentence
    weight: float
    entry_index: int  # Position of the sentence in term's postings (-1 if none)
    sentence_number: int


class SentenceScorer:
    """
    Term-frequency scoring with a sentence length penalty.

    weight(s, q) = Σ tf(t, s) * idf(t) / penalty(s)

    Where:
    - tf(t, s) = occurrences of term t in sentence s
    - idf(t) = |D| / occurrences of t in the whole document
    - |D| = document length in characters
    - penalty(s) = 1 + |ln(benchmark_length) - ln(|s|)|
    """

    def __init__(self, index: SentenceIndex, config: SnippetConfig | None = None):
        self.index = index
        self.config = config or SnippetConfig()
        self._log_benchmark = math.log(self.config.benchmark_length)

    def idf(self, term: str) -> float:
        return self.index.document_length / self.index.occurrences[term]

    def length_penalty(self, sentence: int) -> float:
        # Empty sentences are measured as one character
        length = max(self.index.sentence_length(sentence), 1)
        return 1.0 + abs(self._log_benchmark - math.log(length))

    def score(self, sentence: int, tokens: list[str]) -> SentenceWeighingResult:
        weight = 0.0
        term = None
        entry_index = -1

        for token in tokens:
            tf = self.index.term_frequency(token, sentence)
            if tf == 0:
                continue
            if term is None:
                term = token
                entry_index = self.index.postings[token].find(sentence)
            weight += tf * self.idf(token)

        return SentenceWeighingResult(
            term=term,
            weight=weight / self.length_penalty(sentence),
            entry_index=entry_index,
            sentence_number=sentence,
        )

    def score_batch(
        self, candidates: set[int], tokens: list[str]
    ) -> list[SentenceWeighingResult]:
        """Score all candidates, in ascending sentence order."""
        return [self.score(sentence, tokens) for sentence in sorted(candidates)]


def top_k(
    results: list[SentenceWeighingResult], k: int
) -> list[SentenceWeighingResult]:
    """Best ``k`` results; equal weights go to the earlier sentence."""
    ranked = sorted(results, key=lambda r: (-r.weight, r.sentence_number))
    return ranked[:k]
