import io
from typing import ClassVar

import docx

from docanalyzer.extraction.models import ExtractionMethod
from docanalyzer.formats.base import BaseFormatExtractor
from docanalyzer.formats.exceptions import DocxExtractionError


class DocxAdapter(BaseFormatExtractor):
    """Extracts raw paragraph text from DOCX using python-docx."""

    method: ClassVar[ExtractionMethod] = ExtractionMethod.DOCX

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            text = "\n".join(p.text for p in document.paragraphs).strip()
        except Exception as exc:
            raise DocxExtractionError(f"python-docx extraction failed: {exc}") from exc
        if not text:
            raise DocxExtractionError("DOCX document contains no paragraph text")
        return text
