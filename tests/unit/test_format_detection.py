import pytest

from docanalyzer.formats.detection import (
    DOCX_MIME_TYPE,
    DocumentFormat,
    detect_format,
    looks_like_pdf,
)


class TestDetectFormat:
    @pytest.mark.parametrize(
        ("declared_type", "expected"),
        [
            ("text/plain", DocumentFormat.PLAIN_TEXT),
            ("application/rtf", DocumentFormat.RTF),
            ("text/rtf", DocumentFormat.RTF),
            (DOCX_MIME_TYPE, DocumentFormat.DOCX),
            ("application/pdf", DocumentFormat.PDF),
        ],
    )
    def test_detects_by_mime_type(self, declared_type: str, expected: DocumentFormat) -> None:
        assert detect_format(declared_type, "file.bin") is expected

    def test_ignores_mime_parameters_and_case(self) -> None:
        assert detect_format("Text/Plain; charset=utf-8") is DocumentFormat.PLAIN_TEXT

    def test_falls_back_to_extension(self) -> None:
        assert detect_format("application/octet-stream", "Lease.PDF") is DocumentFormat.PDF
        assert detect_format("", "notes.rtf") is DocumentFormat.RTF

    def test_unknown_type_is_unsupported(self) -> None:
        assert detect_format("image/png", "scan.png") is DocumentFormat.UNSUPPORTED

    def test_missing_type_and_name_is_unsupported(self) -> None:
        assert detect_format(None, None) is DocumentFormat.UNSUPPORTED


class TestLooksLikePdf:
    def test_true_for_pdf_header(self, sample_pdf_bytes: bytes) -> None:
        assert looks_like_pdf(sample_pdf_bytes)

    def test_false_for_other_bytes(self) -> None:
        assert not looks_like_pdf(b"PK\x03\x04")
        assert not looks_like_pdf(b"")
