import pytest
from unittest.mock import patch

from opinionminer.extractors.text import TextExtractor


class TestTextExtractor:
    @pytest.mark.timeout(5)
    def test_validate_file_exists(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("hello", encoding="utf-8")
        assert TextExtractor().validate_file(path) == path

    @pytest.mark.timeout(5)
    def test_validate_file_not_exists(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TextExtractor().validate_file(tmp_path / "nonexistent.txt")

    @pytest.mark.timeout(5)
    def test_extract_utf8(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("Café déjà vu. Naïve joy.", encoding="utf-8")
        assert TextExtractor().extract(path) == "Café déjà vu. Naïve joy."

    @pytest.mark.timeout(5)
    def test_extract_detects_legacy_encoding(self, tmp_path):
        text = "Le café était très agréable et la soirée fut délicieuse. " * 20
        path = tmp_path / "latin.txt"
        path.write_bytes(text.encode("latin-1"))
        extracted = TextExtractor().extract(path)
        assert "café" in extracted
        assert "\ufffd" not in extracted

    @pytest.mark.timeout(5)
    def test_extract_accepts_str_path(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("plain", encoding="utf-8")
        assert TextExtractor().extract(str(path)) == "plain"

    @pytest.mark.timeout(5)
    def test_low_confidence_detection_is_still_used(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("Très agréable soirée.".encode("latin-1"))
        with patch(
            "opinionminer.extractors.text.chardet.detect",
            return_value={"encoding": "Windows-1252", "confidence": 0.157},
        ):
            assert TextExtractor().extract(path) == "Très agréable soirée."

    @pytest.mark.timeout(5)
    def test_undetectable_bytes_are_replaced(self, tmp_path):
        path = tmp_path / "junk.txt"
        path.write_bytes(b"ok \xff\xfe end")
        with patch(
            "opinionminer.extractors.text.chardet.detect",
            return_value={"encoding": None, "confidence": 0.0},
        ):
            text = TextExtractor().extract(path)
        assert text.startswith("ok ")
        assert "\ufffd" in text
