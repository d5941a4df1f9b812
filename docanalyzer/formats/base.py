from abc import ABC, abstractmethod
from typing import ClassVar

from docanalyzer.extraction.models import ExtractionMethod, StrategyResult
from docanalyzer.formats.exceptions import FormatExtractionError


class BaseFormatExtractor(ABC):
    """Contract for byte-to-text extractors of one format family."""

    method: ClassVar[ExtractionMethod]

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract text from the raw payload.

        Raises:
            FormatExtractionError: if the payload is malformed or empty.
        """

    def try_extract(self, data: bytes) -> StrategyResult:
        """Run ``extract`` and report failure as a result instead of raising."""
        try:
            return StrategyResult.success(self.extract(data), self.method)
        except FormatExtractionError as exc:
            return StrategyResult.failure(str(exc), self.method)
