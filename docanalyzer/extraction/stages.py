from docanalyzer.extraction.models import ExtractionMethod, StrategyResult
from docanalyzer.extraction.pipeline import ExtractionContext, ExtractionStage
from docanalyzer.formats.detection import DocumentFormat, detect_format
from docanalyzer.formats.exceptions import UnsupportedFormatError
from docanalyzer.formats.factory import FormatExtractorFactory
from docanalyzer.logging.logger import Log
from docanalyzer.ocr.ocr_extractor import OcrExtractor
from docanalyzer.pdf.chain import PdfStrategyChain
from docanalyzer.resilience.retry import NO_RETRY, RetryConfig, retry_with_backoff
from docanalyzer.storage.base import BaseBlobStorage
from docanalyzer.storage.exceptions import StorageTimeoutError
from docanalyzer.text.cleaner import clean_text
from docanalyzer.text.screening import TextScreen


class CachedTextStage(ExtractionStage):
    """Accepts previously extracted text without re-validating it."""

    name = "cached"

    def __init__(self, min_length: int = 50) -> None:
        self._min_length = min_length

    def applies(self, context: ExtractionContext) -> bool:
        return not context.force_reextract and bool(context.version.cached_text)

    def run(self, context: ExtractionContext) -> ExtractionContext:
        cached = (context.version.cached_text or "").strip()
        if len(cached) < self._min_length:
            context.reject(self.name, f"cached text too short ({len(cached)} chars)")
            return context
        context.accept(StrategyResult.success(clean_text(cached), ExtractionMethod.CACHED))
        Log.info(f"Using cached text for version {context.version.id}")
        return context


class DownloadStage(ExtractionStage):
    """Fetches the payload. StorageError propagates and ends the run."""

    name = "download"

    def __init__(self, storage: BaseBlobStorage, retry: RetryConfig = NO_RETRY) -> None:
        self._storage = storage
        self._retry = retry

    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.raw_bytes = retry_with_backoff(
            self._storage.download,
            self._retry,
            (StorageTimeoutError,),
            context.version.storage_path,
        )
        context.document_format = detect_format(
            context.document.declared_type, context.document.name
        )
        Log.info(
            f"Downloaded {len(context.raw_bytes)} bytes for version {context.version.id} "
            f"(format {context.document_format.value})"
        )
        return context


class StandardExtractionStage(ExtractionStage):
    """Plain text, RTF and DOCX extraction."""

    name = "standard"

    def __init__(self, screen: TextScreen) -> None:
        self._screen = screen

    def applies(self, context: ExtractionContext) -> bool:
        return context.document_format is not DocumentFormat.PDF

    def run(self, context: ExtractionContext) -> ExtractionContext:
        document_format = context.document_format or DocumentFormat.UNSUPPORTED
        try:
            extractor = FormatExtractorFactory.create(document_format)
        except UnsupportedFormatError:
            context.reject(
                self.name,
                f"unsupported document type '{context.document.declared_type}'",
            )
            return context
        result = extractor.try_extract(context.raw_bytes)
        if result.ok:
            result = self._screen.screen(result.text, extractor.method)
        if result.ok:
            context.accept(result)
            Log.info(f"Standard extraction accepted ({extractor.method.value})")
        else:
            context.reject(self.name, f"{extractor.method.value}: {result.error}")
            Log.warning(f"Standard extraction failed: {result.error}")
        return context


class PdfChainStage(ExtractionStage):
    name = "pdf_chain"

    def __init__(self, chain: PdfStrategyChain) -> None:
        self._chain = chain

    def applies(self, context: ExtractionContext) -> bool:
        return context.document_format is DocumentFormat.PDF

    def run(self, context: ExtractionContext) -> ExtractionContext:
        result = self._chain.extract(context.raw_bytes)
        if result.ok:
            context.accept(result)
        else:
            context.reject(self.name, result.error or "all PDF engines failed")
        return context


class OcrFallbackStage(ExtractionStage):
    """Single OCR attempt for PDFs the engines could not read."""

    name = "ocr"

    def __init__(self, ocr: OcrExtractor) -> None:
        self._ocr = ocr

    def applies(self, context: ExtractionContext) -> bool:
        return context.document_format is DocumentFormat.PDF

    def run(self, context: ExtractionContext) -> ExtractionContext:
        result = self._ocr.try_extract(
            context.raw_bytes,
            context.document.declared_type,
            context.document.name or "document.pdf",
        )
        if result.ok:
            context.accept(result)
            Log.info("OCR extraction accepted")
        else:
            context.reject(self.name, result.error or "OCR extraction failed")
            Log.warning(f"OCR extraction failed: {result.error}")
        return context
