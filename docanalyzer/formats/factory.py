from typing import ClassVar

from docanalyzer.formats.base import BaseFormatExtractor
from docanalyzer.formats.detection import DocumentFormat
from docanalyzer.formats.docx_adapter import DocxAdapter
from docanalyzer.formats.exceptions import UnsupportedFormatError
from docanalyzer.formats.plain_text_adapter import PlainTextAdapter
from docanalyzer.formats.rtf_adapter import RtfAdapter


class FormatExtractorFactory:
    """Maps non-PDF format families to their extractor."""

    ADAPTERS: ClassVar[dict[DocumentFormat, type[BaseFormatExtractor]]] = {
        DocumentFormat.PLAIN_TEXT: PlainTextAdapter,
        DocumentFormat.RTF: RtfAdapter,
        DocumentFormat.DOCX: DocxAdapter,
    }

    @classmethod
    def create(cls, document_format: DocumentFormat) -> BaseFormatExtractor:
        adapter_cls = cls.ADAPTERS.get(document_format)
        if adapter_cls is None:
            raise UnsupportedFormatError(
                f"No standard extractor for format '{document_format.value}'"
            )
        return adapter_cls()
