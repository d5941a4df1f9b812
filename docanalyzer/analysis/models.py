from dataclasses import dataclass
from enum import Enum

DISCLAIMER = (
    "This AI-generated analysis is for informational purposes only "
    "and should be reviewed by qualified professionals."
)


class AnalysisType(str, Enum):
    KEY_TERMS = "key_terms"
    RISKS = "risks"
    SUMMARY = "summary"


@dataclass(frozen=True)
class AnalysisRequest:
    """Input to the dispatcher, built only from successfully extracted text."""

    text: str
    analysis_type: AnalysisType
    document_type: str


@dataclass(frozen=True)
class AnalysisResult:
    """Parsed inference output for one analysis type."""

    document_type: str
    key_terms: list[str] | None = None
    risks: list[str] | None = None
    summary: str | None = None


@dataclass(frozen=True)
class AnalysisOutcome:
    """Terminal artifact returned to the caller."""

    success: bool
    analysis_type: str
    document_type: str = ""
    word_count: int = 0
    extraction_method: str = ""
    key_terms: tuple[str, ...] | None = None
    risks: tuple[str, ...] | None = None
    summary: str | None = None
    disclaimer: str = DISCLAIMER
    error: str | None = None

    def to_response(self) -> dict[str, object]:
        """Render the camelCase response; optional keys only when set."""
        response: dict[str, object] = {
            "success": self.success,
            "analysisType": self.analysis_type,
        }
        if self.key_terms is not None:
            response["keyTerms"] = list(self.key_terms)
        if self.risks is not None:
            response["risks"] = list(self.risks)
        if self.summary is not None:
            response["summary"] = self.summary
        response["documentType"] = self.document_type
        response["wordCount"] = self.word_count
        response["extractionMethod"] = self.extraction_method
        response["disclaimer"] = self.disclaimer
        if self.error is not None:
            response["error"] = self.error
        return response
