"""Test document loading."""

import pytest

from sentence_snippets.errors import DocumentLoadError
from sentence_snippets.loader import load_document


class TestLoadDocument:
    """Test reading documents from disk."""

    def test_utf8(self, tmp_path):
        """Should decode UTF-8 text."""
        path = tmp_path / "doc.txt"
        path.write_text("Привет, мир. Hello!", encoding="utf-8")
        assert load_document(path) == "Привет, мир. Hello!"

    def test_accepts_str_path(self, document_file):
        """Should accept a plain string path."""
        assert load_document(str(document_file)).startswith("Cats sleep.")

    def test_other_encoding(self, tmp_path):
        """Should decode with the requested encoding."""
        path = tmp_path / "doc.txt"
        path.write_bytes("Тест.".encode("cp1251"))
        assert load_document(path, encoding="cp1251") == "Тест."

    def test_missing_file(self, tmp_path):
        """Should raise DocumentLoadError for a missing file."""
        path = tmp_path / "missing.txt"
        with pytest.raises(DocumentLoadError) as exc_info:
            load_document(path)
        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_directory(self, tmp_path):
        """Should raise DocumentLoadError for a directory."""
        with pytest.raises(DocumentLoadError):
            load_document(tmp_path)

    def test_undecodable(self, tmp_path):
        """Should raise DocumentLoadError for invalid bytes."""
        path = tmp_path / "doc.bin"
        path.write_bytes(b"\xff\xfe\xfa\x80")
        with pytest.raises(DocumentLoadError) as exc_info:
            load_document(path, encoding="utf-8")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_unknown_encoding(self, document_file):
        """Should raise DocumentLoadError for an unknown codec."""
        with pytest.raises(DocumentLoadError):
            load_document(document_file, encoding="no-such-codec")
