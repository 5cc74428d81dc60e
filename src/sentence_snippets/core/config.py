"""
Snippet Engine Configuration

Tuning constants for query ranking and snippet assembly, plus process-level
settings read from the environment.
"""

import os

from pydantic import BaseModel, ConfigDict, Field


class SnippetConfig(BaseModel):
    """Ranking and assembly parameters."""

    model_config = ConfigDict(frozen=True)

    max_tokens: int = Field(
        default=5, ge=1, description="Query terms kept after sort-and-truncate"
    )
    max_sentences: int = Field(
        default=3, ge=1, description="Sentences joined into one snippet"
    )
    candidate_factor: int = Field(
        default=2,
        ge=1,
        description="Postings read per query term, as a multiple of max_sentences",
    )
    benchmark_length: float = Field(
        default=60.0, gt=0, description="Typical sentence length in characters"
    )
    separator: str = Field(default=" ... ", description="Glue between sentences")

    @property
    def candidates_per_token(self) -> int:
        return self.candidate_factor * self.max_sentences


class Settings:
    """Process configuration (environment driven)"""

    # Ranking
    MAX_TOKENS: int = int(os.getenv("SNIPPET_MAX_TOKENS", "5"))
    MAX_SENTENCES: int = int(os.getenv("SNIPPET_MAX_SENTENCES", "3"))
    CANDIDATE_FACTOR: int = int(os.getenv("SNIPPET_CANDIDATE_FACTOR", "2"))
    BENCHMARK_LENGTH: float = float(os.getenv("SNIPPET_BENCHMARK_LENGTH", "60"))
    SEPARATOR: str = os.getenv("SNIPPET_SEPARATOR", " ... ")

    # Documents
    ENCODING: str = os.getenv("SNIPPET_ENCODING", "utf-8")

    # Output
    LANGUAGE: str = os.getenv("SNIPPET_LANG", "en")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    def snippet_config(self) -> SnippetConfig:
        """Build a validated SnippetConfig from the current values."""
        return SnippetConfig(
            max_tokens=self.MAX_TOKENS,
            max_sentences=self.MAX_SENTENCES,
            candidate_factor=self.CANDIDATE_FACTOR,
            benchmark_length=self.BENCHMARK_LENGTH,
            separator=self.SEPARATOR,
        )


settings = Settings()
