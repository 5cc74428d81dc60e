"""Test fixtures for the snippet engine."""

import pytest

from sentence_snippets.search.indexer import build_index

ANIMALS = "Cats sleep. Dogs run fast. Cats and dogs play."

ESSAY = (
    "Search engines show short excerpts of each result. "
    "An excerpt is built from whole sentences of the page!\n\n"
    "Which sentences are chosen? The ones that mention the query words most often, "
    "preferring sentences of a typical length.\n"
    "Very long or very short sentences make poor excerpts, so they are penalized. "
    "Finally, the chosen sentences are printed in the order of the page"
)


@pytest.fixture
def animals_index():
    return build_index(ANIMALS)


@pytest.fixture
def essay_index():
    return build_index(ESSAY)


@pytest.fixture
def document_file(tmp_path):
    """Write the animals document to disk."""
    path = tmp_path / "animals.txt"
    path.write_text(ANIMALS, encoding="utf-8")
    return path
