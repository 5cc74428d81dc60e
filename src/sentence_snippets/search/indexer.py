"""
Sentence Indexer

Builds the sentence-granular inverted index for one document.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

import numpy as np

from sentence_snippets.analyzer import normalize_term, segmenter

logger = logging.getLogger(__name__)


def _frozen(values: list[int]) -> np.ndarray:
    array = np.asarray(values, dtype=np.int64)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class TermPostings:
    """Sentences containing one term, ascending, with per-sentence counts."""

    sentences: np.ndarray
    frequencies: np.ndarray

    def __len__(self) -> int:
        return len(self.sentences)

    def find(self, sentence: int) -> int:
        """
        Binary search for ``sentence``.

        Returns the entry index, or -1 when the term does not occur there.
        """
        i = int(np.searchsorted(self.sentences, sentence, side="left"))
        if i < len(self.sentences) and self.sentences[i] == sentence:
            return i
        return -1


@dataclass(frozen=True, eq=False)
class SentenceIndex:
    """
    Read-only index over a single document.

    Attributes:
        document: Full document text
        offsets: Start offset of every sentence (offsets[0] == 0)
        postings: term -> TermPostings
        occurrences: term -> total count in the document
    """

    document: str
    offsets: np.ndarray
    postings: Mapping[str, TermPostings]
    occurrences: Mapping[str, int]

    @property
    def document_length(self) -> int:
        return len(self.document)

    @property
    def sentence_count(self) -> int:
        return len(self.offsets)

    def __contains__(self, term: object) -> bool:
        return term in self.occurrences

    def sentence_bounds(self, sentence: int) -> tuple[int, int]:
        """Character range of a sentence; the last one ends at the document end."""
        start = int(self.offsets[sentence])
        if sentence + 1 < len(self.offsets):
            end = int(self.offsets[sentence + 1])
        else:
            end = self.document_length
        return start, end

    def sentence_length(self, sentence: int) -> int:
        start, end = self.sentence_bounds(sentence)
        return end - start

    def sentence_text(self, sentence: int) -> str:
        start, end = self.sentence_bounds(sentence)
        return self.document[start:end].strip()

    def term_frequency(self, term: str, sentence: int) -> int:
        """Occurrences of ``term`` inside ``sentence`` (0 if absent)."""
        postings = self.postings.get(term)
        if postings is None:
            return 0
        i = postings.find(sentence)
        if i < 0:
            return 0
        return int(postings.frequencies[i])


class SentenceIndexer:
    """Accumulates term statistics while the segmenter walks the document."""

    def __init__(self, text: str):
        self.text = text
        self._entries: dict[str, list[list[int]]] = {}
        self._occurrences: dict[str, int] = {}

    def build(self) -> SentenceIndex:
        offsets = segmenter.scan(self.text, self.add_word)

        postings = {
            term: TermPostings(
                sentences=_frozen([sentence for sentence, _ in entries]),
                frequencies=_frozen([tf for _, tf in entries]),
            )
            for term, entries in self._entries.items()
        }

        index = SentenceIndex(
            document=self.text,
            offsets=_frozen(offsets),
            postings=MappingProxyType(postings),
            occurrences=MappingProxyType(dict(self._occurrences)),
        )
        logger.info(
            f"Indexed document: chars={index.document_length} "
            f"sentences={index.sentence_count} terms={len(postings)}"
        )
        return index

    def add_word(self, start: int, end: int, sentence: int) -> None:
        """Register one word span; spans that are not terms are skipped."""
        term = normalize_term(self.text[start:end])
        if term is None:
            return

        self._occurrences[term] = self._occurrences.get(term, 0) + 1

        entries = self._entries.get(term)
        if entries is None:
            self._entries[term] = [[sentence, 1]]
        elif entries[-1][0] == sentence:
            entries[-1][1] += 1
        else:
            entries.append([sentence, 1])


def build_index(text: str) -> SentenceIndex:
    """Segment and index ``text`` in one pass."""
    return SentenceIndexer(text).build()
