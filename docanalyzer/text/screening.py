from docanalyzer.config.settings import Settings
from docanalyzer.extraction.models import ExtractionMethod, StrategyResult
from docanalyzer.text.cleaner import clean_text
from docanalyzer.text.validity import TextValidityHeuristic


class TextScreen:
    """Decides whether raw strategy output is acceptable and cleans it.

    The validity heuristic is optional: output from trustworthy non-PDF
    extractors is only held to the minimum length.
    """

    def __init__(
        self,
        *,
        min_length: int,
        heuristic: TextValidityHeuristic | None = None,
    ) -> None:
        self._min_length = min_length
        self._heuristic = heuristic

    def screen(self, text: str | None, method: ExtractionMethod) -> StrategyResult:
        if text is None or not text.strip():
            return StrategyResult.failure("no text extracted", method)
        if self._heuristic is not None and not self._heuristic.is_valid(text):
            return StrategyResult.failure("text failed validity check", method)
        cleaned = clean_text(text)
        if len(cleaned) < self._min_length:
            return StrategyResult.failure(
                f"text too short ({len(cleaned)} < {self._min_length} chars)", method
            )
        return StrategyResult.success(cleaned, method)


def strict_screen(settings: Settings) -> TextScreen:
    """Screen for PDF and OCR output: validity heuristic plus minimum length."""
    return TextScreen(
        min_length=settings.extracted_text_min_length,
        heuristic=TextValidityHeuristic(
            max_marker_count=settings.validity_max_marker_count,
            min_word_ratio=settings.validity_min_word_ratio,
        ),
    )


def lenient_screen(settings: Settings) -> TextScreen:
    """Screen for trusted non-PDF extractors: a lower minimum length, no heuristic."""
    return TextScreen(min_length=settings.standard_text_min_length)
