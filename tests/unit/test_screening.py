from unittest.mock import MagicMock

from docanalyzer.config.settings import Settings
from docanalyzer.extraction.models import ExtractionMethod
from docanalyzer.text.screening import TextScreen, lenient_screen, strict_screen
from docanalyzer.text.validity import TextValidityHeuristic

LONG_TEXT = "The Client shall pay every invoice within thirty days of receiving it."


class TestTextScreen:
    def test_accepts_and_cleans_text(self) -> None:
        screen = TextScreen(min_length=10)
        result = screen.screen("  The   Client pays.  \n\n\n\n 7 \n", ExtractionMethod.DOCX)
        assert result.ok
        assert result.text == "The Client pays."
        assert result.method is ExtractionMethod.DOCX

    def test_rejects_none(self) -> None:
        result = TextScreen(min_length=1).screen(None, ExtractionMethod.PDFPLUMBER)
        assert not result.ok
        assert result.error == "no text extracted"

    def test_rejects_whitespace(self) -> None:
        result = TextScreen(min_length=1).screen("   \n ", ExtractionMethod.PDFPLUMBER)
        assert result.error == "no text extracted"

    def test_rejects_short_cleaned_text(self) -> None:
        result = TextScreen(min_length=50).screen("Too short", ExtractionMethod.RTF)
        assert not result.ok
        assert result.error == "text too short (9 < 50 chars)"

    def test_length_is_measured_after_cleaning(self) -> None:
        padded = "word   " * 3 + "\n1\n2\n3\n"
        result = TextScreen(min_length=15).screen(padded, ExtractionMethod.PLAIN_TEXT)
        assert not result.ok

    def test_rejects_when_heuristic_fails(self) -> None:
        heuristic = MagicMock(spec=TextValidityHeuristic)
        heuristic.is_valid.return_value = False
        screen = TextScreen(min_length=1, heuristic=heuristic)
        result = screen.screen(LONG_TEXT, ExtractionMethod.PYMUPDF)
        assert result.error == "text failed validity check"
        heuristic.is_valid.assert_called_once_with(LONG_TEXT)


class TestScreenBuilders:
    def test_strict_screen_applies_heuristic(self) -> None:
        screen = strict_screen(Settings())
        garbage = "obj stream endobj xref trailer " * 5
        assert not screen.screen(garbage, ExtractionMethod.PDFPLUMBER).ok
        assert screen.screen(LONG_TEXT, ExtractionMethod.PDFPLUMBER).ok

    def test_lenient_screen_skips_heuristic(self) -> None:
        screen = lenient_screen(Settings())
        text = "@@@@ #### $$$$ %%%% ^^^^ &&&& **** (((( )))) ____ ++++ ===="
        assert screen.screen(text, ExtractionMethod.PLAIN_TEXT).ok

    def test_uses_configured_minimum(self) -> None:
        screen = lenient_screen(Settings(standard_text_min_length=200))
        assert not screen.screen(LONG_TEXT, ExtractionMethod.PLAIN_TEXT).ok

    def test_lenient_screen_accepts_short_plain_text(self) -> None:
        screen = lenient_screen(Settings())
        text = "Net thirty days, due."
        result = screen.screen(text, ExtractionMethod.PLAIN_TEXT)
        assert result.ok
        assert not strict_screen(Settings()).screen(text, ExtractionMethod.PDFPLUMBER).ok
