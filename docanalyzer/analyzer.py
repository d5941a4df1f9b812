from docanalyzer.analysis.dispatcher import AnalysisDispatcher
from docanalyzer.analysis.document_type import infer_document_type
from docanalyzer.analysis.exceptions import AnalysisError
from docanalyzer.analysis.factory import AnalysisDispatcherFactory
from docanalyzer.analysis.models import AnalysisOutcome, AnalysisRequest, AnalysisType
from docanalyzer.config.settings import Settings
from docanalyzer.database.connection import init_pool
from docanalyzer.database.repositories.documents_repository import DocumentsRepository
from docanalyzer.documents.base import BaseDocumentRepository
from docanalyzer.documents.exceptions import DocumentLookupError
from docanalyzer.extraction.exceptions import ExtractionError
from docanalyzer.extraction.models import ExtractionOutcome
from docanalyzer.extraction.orchestrator import ExtractionOrchestrator, build_orchestrator
from docanalyzer.logging.logger import Log
from docanalyzer.text.cleaner import word_count


class DocumentAnalyzer:
    """Public entry point: extract text for a document version and analyze it.

    Pipeline: validate -> load metadata -> extract -> infer type -> dispatch.
    """

    def __init__(
        self,
        repository: BaseDocumentRepository,
        orchestrator: ExtractionOrchestrator,
        dispatcher: AnalysisDispatcher,
    ) -> None:
        self._repository = repository
        self._orchestrator = orchestrator
        self._dispatcher = dispatcher

    def analyze(
        self,
        document_id: str,
        version_id: str,
        analysis_type: str,
        force_reextract: bool = False,
    ) -> AnalysisOutcome:
        """Run the full pipeline. Never raises; failures become outcomes."""
        requested_type = str(analysis_type or "")
        if not document_id or not version_id or not requested_type:
            return _failure(
                requested_type,
                "Missing required fields: documentId, versionId, analysisType",
            )
        try:
            parsed_type = AnalysisType(requested_type)
        except ValueError:
            supported = [t.value for t in AnalysisType]
            return _failure(
                requested_type,
                f"Unsupported analysis type '{requested_type}'. Choose from: {supported}",
            )

        Log.info(
            f"Analyzing document {document_id} version {version_id} "
            f"({parsed_type.value}, force_reextract={force_reextract})"
        )
        try:
            return self._run(document_id, version_id, parsed_type, force_reextract)
        except DocumentLookupError as exc:
            Log.error(f"Document lookup failed: {exc}")
            return _failure(requested_type, str(exc))
        except ExtractionError as exc:
            return _failure(requested_type, str(exc))
        except AnalysisError as exc:
            Log.error(f"Analysis failed for document {document_id}: {exc}")
            return _failure(requested_type, str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected analysis error for document {document_id}")
            return _failure(requested_type, f"Unexpected analysis error: {exc}")

    def _run(
        self,
        document_id: str,
        version_id: str,
        analysis_type: AnalysisType,
        force_reextract: bool,
    ) -> AnalysisOutcome:
        document = self._repository.get_document(document_id)
        version = self._repository.get_document_version(version_id)

        extraction = self._orchestrator.extract(document, version, force_reextract)
        text = _require_text(extraction)

        document_type = infer_document_type(document.name, text)
        result = self._dispatcher.dispatch(
            AnalysisRequest(text=text, analysis_type=analysis_type, document_type=document_type)
        )
        method = extraction.method.value if extraction.method else ""
        Log.info(
            f"Analysis complete for document {document_id}: "
            f"type={document_type}, method={method}"
        )
        return AnalysisOutcome(
            success=True,
            analysis_type=analysis_type.value,
            document_type=document_type,
            word_count=word_count(text),
            extraction_method=method,
            key_terms=_frozen(result.key_terms),
            risks=_frozen(result.risks),
            summary=result.summary,
        )


def _require_text(extraction: ExtractionOutcome) -> str:
    if not extraction.success or extraction.text is None:
        raise ExtractionError(extraction.error or "Text extraction failed.")
    return extraction.text


def _frozen(items: list[str] | None) -> tuple[str, ...] | None:
    return None if items is None else tuple(items)


def _failure(analysis_type: str, error: str) -> AnalysisOutcome:
    return AnalysisOutcome(success=False, analysis_type=analysis_type, error=error)


def build_analyzer(settings: Settings) -> DocumentAnalyzer:
    """Build a DocumentAnalyzer with all production collaborators.

    Configures logging and opens the metadata connection pool; the host
    application calls ``close_pool()`` on shutdown.
    """
    Log.configure(settings.log_level)
    init_pool(settings)
    return DocumentAnalyzer(
        repository=DocumentsRepository(),
        orchestrator=build_orchestrator(settings),
        dispatcher=AnalysisDispatcherFactory.create(settings),
    )
