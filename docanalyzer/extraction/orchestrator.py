from collections.abc import Sequence

from docanalyzer.config.settings import Settings
from docanalyzer.documents.models import DocumentRef, DocumentVersionRef
from docanalyzer.extraction.models import ExtractionOutcome
from docanalyzer.extraction.pipeline import ExtractionContext, ExtractionStage
from docanalyzer.extraction.stages import (
    CachedTextStage,
    DownloadStage,
    OcrFallbackStage,
    PdfChainStage,
    StandardExtractionStage,
)
from docanalyzer.logging.logger import Log
from docanalyzer.ocr.factory import OcrExtractorFactory
from docanalyzer.ocr.ocr_extractor import OcrExtractor
from docanalyzer.pdf.chain import PdfStrategyChain
from docanalyzer.pdf.factory import PdfExtractorFactory
from docanalyzer.resilience.retry import RetryConfig
from docanalyzer.storage.base import BaseBlobStorage
from docanalyzer.storage.exceptions import StorageError
from docanalyzer.storage.factory import BlobStorageFactory
from docanalyzer.text.screening import lenient_screen


class ExtractionOrchestrator:
    """Runs the extraction stages in order until one accepts text.

    Pipeline: cached -> download -> standard | pdf_chain -> ocr.
    A download failure ends the run immediately; every other failure falls
    through to the next applicable stage.
    """

    def __init__(self, stages: Sequence[ExtractionStage], final_min_length: int = 20) -> None:
        self._stages = list(stages)
        self._final_min_length = final_min_length

    def extract(
        self,
        document: DocumentRef,
        version: DocumentVersionRef,
        force_reextract: bool = False,
    ) -> ExtractionOutcome:
        """Produce text for one document version. Never raises."""
        context = ExtractionContext(
            document=document,
            version=version,
            force_reextract=force_reextract,
        )
        try:
            self._run_stages(context)
        except StorageError as exc:
            Log.error(f"Download failed for version {version.id}: {exc}")
            return ExtractionOutcome(
                success=False,
                error=str(exc),
                attempted_stages=list(context.attempted_stages),
            )
        except Exception as exc:
            Log.exception(f"Unexpected extraction error for version {version.id}")
            return ExtractionOutcome(
                success=False,
                error=f"Unexpected extraction error: {exc}",
                attempted_stages=list(context.attempted_stages),
            )
        finally:
            context.raw_bytes = b""

        return self._finish(context)

    def _run_stages(self, context: ExtractionContext) -> None:
        for stage in self._stages:
            if context.accepted:
                return
            if not stage.applies(context):
                continue
            context.attempted_stages.append(stage.name)
            stage.run(context)

    def _finish(self, context: ExtractionContext) -> ExtractionOutcome:
        stages = list(context.attempted_stages)
        if context.text is None:
            error = "Text extraction failed. " + (
                "; ".join(context.diagnostics) or "no applicable extraction stage"
            )
            Log.error(f"Extraction failed for version {context.version.id}: {error}")
            return ExtractionOutcome(success=False, error=error, attempted_stages=stages)
        if len(context.text) < self._final_min_length:
            error = (
                f"Extracted text is too short or empty "
                f"({len(context.text)} < {self._final_min_length} chars)"
            )
            Log.error(f"Extraction failed for version {context.version.id}: {error}")
            return ExtractionOutcome(
                success=False,
                method=context.method,
                error=error,
                attempted_stages=stages,
            )
        Log.info(
            f"Extraction completed for version {context.version.id}: "
            f"method={context.method.value if context.method else None}, "
            f"{len(context.text)} chars"
        )
        return ExtractionOutcome(
            success=True,
            text=context.text,
            method=context.method,
            attempted_stages=stages,
        )


def build_orchestrator(
    settings: Settings,
    storage: BaseBlobStorage | None = None,
    pdf_chain: PdfStrategyChain | None = None,
    ocr: OcrExtractor | None = None,
) -> ExtractionOrchestrator:
    """Build the orchestrator with the configured collaborators."""
    storage = storage if storage is not None else BlobStorageFactory.create(settings)
    pdf_chain = pdf_chain if pdf_chain is not None else PdfExtractorFactory.create_chain(settings)
    ocr = ocr if ocr is not None else OcrExtractorFactory.create(settings)
    stages: list[ExtractionStage] = [
        CachedTextStage(min_length=settings.cached_text_min_length),
        DownloadStage(storage, RetryConfig.from_settings(settings)),
        StandardExtractionStage(lenient_screen(settings)),
        PdfChainStage(pdf_chain),
    ]
    if ocr is not None:
        stages.append(OcrFallbackStage(ocr))
    return ExtractionOrchestrator(stages, final_min_length=settings.final_text_min_length)
