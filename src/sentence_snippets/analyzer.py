"""
Text Analyzer

Sentence and word segmentation plus the term normalization shared by the
indexer and the query processor.
"""

from typing import Callable

# Characters that close a sentence (a blank line closes one too)
SENTENCE_MARKS = frozenset(".?!")

# Characters that close a word, in addition to whitespace and sentence marks
WORD_DELIMITERS = frozenset(",:;")

WordCallback = Callable[[int, int, int], None]


def trim(text: str) -> str:
    return text.strip()


def lowercase(text: str) -> str:
    return text.lower()


def is_alnum(text: str) -> bool:
    """True for a non-empty string made only of letters and digits."""
    return text.isalnum()


def normalize_term(raw: str) -> str | None:
    """
    Turn a raw word into an index term.

    Returns None when the word is empty after trimming or contains anything
    other than letters and digits.
    """
    word = trim(raw)
    if not is_alnum(word):
        return None
    return lowercase(word)


class Segmenter:
    """
    Single-pass sentence/word splitter.

    Sentence boundaries are recorded as an offset table: entry ``i`` is the
    first character of sentence ``i``. Each word span is handed to a callback
    together with its sentence number, in document order.
    """

    def scan(self, text: str, on_word: WordCallback) -> list[int]:
        """
        Walk ``text`` once.

        Args:
            text: Document text
            on_word: Called as ``on_word(start, end, sentence_number)``

        Returns:
            Sentence offset table (always starts with 0)
        """
        length = len(text)
        offsets = [0]
        sentence = 0
        word_start = 0
        previous = ""
        pos = 0

        while pos < length:
            current = text[pos]

            if current in SENTENCE_MARKS or (current == "\n" and previous == "\n"):
                self._emit(on_word, word_start, pos, sentence)

                # Leading punctuation and whitespace belong to no word
                pos += 1
                while pos < length and not text[pos].isalnum():
                    pos += 1

                if pos < length:
                    offsets.append(pos)
                    sentence += 1
                word_start = pos
                previous = ""
                continue

            if current.isspace() or current in WORD_DELIMITERS:
                self._emit(on_word, word_start, pos, sentence)
                word_start = pos + 1

            previous = current
            pos += 1

        self._emit(on_word, word_start, length, sentence)
        return offsets

    def split_sentences(self, text: str) -> list[str]:
        """Return sentence texts without surrounding whitespace."""
        offsets = self.scan(text, lambda start, end, sentence: None)
        bounds = offsets[1:] + [len(text)]
        return [text[start:end].strip() for start, end in zip(offsets, bounds)]

    @staticmethod
    def _emit(on_word: WordCallback, start: int, end: int, sentence: int) -> None:
        if end > start:
            on_word(start, end, sentence)


# Global instance
segmenter = Segmenter()
