from abc import ABC, abstractmethod
from typing import ClassVar

from docanalyzer.extraction.models import ExtractionMethod, StrategyResult
from docanalyzer.logging.logger import Log
from docanalyzer.pdf.exceptions import PdfExtractionError


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction engines."""

    method: ClassVar[ExtractionMethod]

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text of all pages joined by newlines.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """

    def try_extract(self, pdf_bytes: bytes) -> StrategyResult:
        """Run ``extract`` and report failure as a result instead of raising."""
        try:
            return StrategyResult.success(self.extract(pdf_bytes), self.method)
        except PdfExtractionError as exc:
            return StrategyResult.failure(str(exc), self.method)
        except Exception as exc:
            Log.exception(f"PDF engine {self.method.value} crashed: {exc}")
            return StrategyResult.failure(
                f"unexpected {type(exc).__name__}: {exc}", self.method
            )
