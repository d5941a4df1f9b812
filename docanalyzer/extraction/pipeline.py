from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docanalyzer.documents.models import DocumentRef, DocumentVersionRef
from docanalyzer.extraction.models import ExtractionMethod, StrategyResult
from docanalyzer.formats.detection import DocumentFormat


@dataclass(slots=True)
class ExtractionContext:
    """Request-scoped state passed through the extraction stages."""

    document: DocumentRef
    version: DocumentVersionRef
    force_reextract: bool = False
    raw_bytes: bytes = b""
    document_format: DocumentFormat | None = None
    text: str | None = None
    method: ExtractionMethod | None = None
    attempted_stages: list[str] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.text is not None

    def accept(self, result: StrategyResult) -> None:
        self.text = result.text
        self.method = result.method

    def reject(self, stage: str, reason: str) -> None:
        self.diagnostics.append(f"{stage}: {reason}")


class ExtractionStage(ABC):
    """One step of the fallback sequence."""

    name: str = ""

    def applies(self, context: ExtractionContext) -> bool:
        return True

    @abstractmethod
    def run(self, context: ExtractionContext) -> ExtractionContext:
        raise NotImplementedError
