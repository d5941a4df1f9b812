import base64

from docanalyzer.extraction.models import ExtractionMethod, StrategyResult
from docanalyzer.formats.detection import looks_like_pdf
from docanalyzer.logging.logger import Log
from docanalyzer.ocr.client_base import BaseOcrClient
from docanalyzer.ocr.exceptions import OcrError, OcrTimeoutError
from docanalyzer.resilience.retry import NO_RETRY, RetryConfig, retry_with_backoff
from docanalyzer.text.screening import TextScreen


class OcrExtractor:
    """Last-resort PDF extractor delegating to an external OCR service.

    Recognized text is screened like PDF engine output before acceptance.
    """

    method = ExtractionMethod.OCR

    def __init__(
        self,
        client: BaseOcrClient,
        screen: TextScreen,
        retry: RetryConfig = NO_RETRY,
    ) -> None:
        self._client = client
        self._screen = screen
        self._retry = retry

    def try_extract(self, data: bytes, declared_type: str, file_name: str) -> StrategyResult:
        if not looks_like_pdf(data):
            return StrategyResult.failure("payload is not a PDF (missing %PDF header)", self.method)
        encoded = base64.b64encode(data).decode("ascii")
        Log.info(f"Submitting {len(data)} bytes of '{file_name}' to OCR")
        try:
            response = retry_with_backoff(
                self._client.extract_text,
                self._retry,
                (OcrTimeoutError,),
                file_base64=encoded,
                mime_type=declared_type or "application/pdf",
                file_name=file_name,
            )
        except OcrError as exc:
            return StrategyResult.failure(str(exc), self.method)
        if not response.success:
            return StrategyResult.failure(response.error or "OCR extraction failed", self.method)
        return self._screen.screen(response.text, self.method)
