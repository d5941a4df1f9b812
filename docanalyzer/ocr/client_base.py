from abc import ABC, abstractmethod

from docanalyzer.ocr.models import OcrResponse


class BaseOcrClient(ABC):
    """Contract for OCR service clients."""

    @abstractmethod
    def extract_text(self, *, file_base64: str, mime_type: str, file_name: str) -> OcrResponse:
        """Submit a base64 payload for recognition.

        Raises:
            OcrTimeoutError: if the service does not answer in time.
            OcrError: on any other transport or protocol failure.
        """
