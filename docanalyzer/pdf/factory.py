from docanalyzer.config.settings import Settings
from docanalyzer.pdf.base import BasePdfExtractor
from docanalyzer.pdf.chain import PdfStrategyChain
from docanalyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docanalyzer.pdf.pymupdf_adapter import PyMuPdfAdapter
from docanalyzer.text.screening import strict_screen


class PdfExtractorFactory:
    """Builds PDF engines and the ordered strategy chain from settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, engine: str) -> BasePdfExtractor:
        adapter_cls = cls.ADAPTERS.get(engine.lower())
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create_chain(cls, settings: Settings) -> PdfStrategyChain:
        names = [name.lower() for name in settings.pdf_engines]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate PDF engines in {settings.pdf_engines}")
        return PdfStrategyChain([cls.create(name) for name in names], strict_screen(settings))
