from dataclasses import dataclass, field
from enum import Enum


class ExtractionMethod(str, Enum):
    """Which strategy produced the accepted text."""

    CACHED = "cached"
    PLAIN_TEXT = "plain_text"
    RTF = "rtf"
    DOCX = "docx"
    PDFPLUMBER = "pdfplumber"
    PYMUPDF = "pymupdf"
    OCR = "ocr"


@dataclass(frozen=True)
class StrategyResult:
    """Tagged result of a single extraction strategy: text or an error."""

    text: str | None = None
    method: ExtractionMethod | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None and self.error is None

    @classmethod
    def success(cls, text: str, method: ExtractionMethod) -> "StrategyResult":
        return cls(text=text, method=method)

    @classmethod
    def failure(cls, error: str, method: ExtractionMethod | None = None) -> "StrategyResult":
        return cls(error=error, method=method)


@dataclass(frozen=True)
class ExtractionOutcome:
    """Terminal result of the extraction orchestrator. Never persisted."""

    success: bool
    text: str | None = None
    method: ExtractionMethod | None = None
    error: str | None = None
    attempted_stages: list[str] = field(default_factory=list)
