import pytest

from docanalyzer.extraction.models import ExtractionMethod
from docanalyzer.formats.exceptions import PlainTextExtractionError
from docanalyzer.formats.plain_text_adapter import PlainTextAdapter


class TestPlainTextAdapter:
    def test_decodes_utf8(self) -> None:
        text = PlainTextAdapter().extract("Prix: 100 €".encode())
        assert text == "Prix: 100 €"

    def test_strips_utf8_bom(self) -> None:
        text = PlainTextAdapter().extract(b"\xef\xbb\xbfHello")
        assert text == "Hello"

    def test_falls_back_to_cp1252(self) -> None:
        text = PlainTextAdapter().extract("Café terms".encode("cp1252"))
        assert text == "Café terms"

    def test_rejects_binary_payload(self) -> None:
        with pytest.raises(PlainTextExtractionError, match="NUL"):
            PlainTextAdapter().extract(b"abc\x00def")

    def test_rejects_empty_payload(self) -> None:
        with pytest.raises(PlainTextExtractionError, match="empty"):
            PlainTextAdapter().extract(b"  \n ")

    def test_try_extract_reports_failure(self) -> None:
        result = PlainTextAdapter().try_extract(b"")
        assert not result.ok
        assert result.method is ExtractionMethod.PLAIN_TEXT
        assert result.error == "text payload is empty"
