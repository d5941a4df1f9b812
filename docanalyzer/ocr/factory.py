from docanalyzer.config.settings import Settings
from docanalyzer.ocr.http_client_adapter import HttpOcrClientAdapter
from docanalyzer.ocr.ocr_extractor import OcrExtractor
from docanalyzer.resilience.retry import RetryConfig
from docanalyzer.text.screening import strict_screen


class OcrExtractorFactory:
    """Creates the OCR fallback, or None when OCR is disabled."""

    @classmethod
    def create(cls, settings: Settings) -> OcrExtractor | None:
        provider = settings.ocr_provider.lower()
        if provider in ("", "none", "disabled"):
            return None
        if provider != "http":
            raise ValueError(
                f"Unknown OCR provider '{provider}'. Choose from: ['http', 'disabled']"
            )
        base_url = settings.ocr_base_url.strip()
        if not base_url:
            raise ValueError("ocr_base_url is required for ocr_provider=http")
        client = HttpOcrClientAdapter(
            base_url=base_url,
            api_key=settings.ocr_api_key,
            timeout_seconds=settings.ocr_timeout_seconds,
        )
        return OcrExtractor(client, strict_screen(settings), RetryConfig.from_settings(settings))
