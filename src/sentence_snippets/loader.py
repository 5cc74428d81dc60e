"""
Document Loader

Reads a text file from disk and decodes it for indexing.
"""

import logging
from pathlib import Path

from sentence_snippets.core.config import settings
from sentence_snippets.errors import DocumentLoadError

logger = logging.getLogger(__name__)


def load_document(path: str | Path, encoding: str | None = None) -> str:
    """
    Read and decode a whole document.

    Raises:
        DocumentLoadError: If the file is missing, unreadable or not valid
            in ``encoding``
    """
    encoding = encoding or settings.ENCODING
    path = Path(path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error(f"Failed to open {path}: {e}")
        raise DocumentLoadError(str(path), e.strerror or str(e)) from e

    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.error(f"Failed to decode {path} as {encoding}: {e}")
        raise DocumentLoadError(str(path), f"cannot decode as {encoding}") from e

    logger.info(f"Loaded {path} ({len(text)} chars, {encoding})")
    return text
