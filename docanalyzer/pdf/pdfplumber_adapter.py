import io
from typing import ClassVar

import pdfplumber

from docanalyzer.extraction.models import ExtractionMethod
from docanalyzer.pdf.base import BasePdfExtractor
from docanalyzer.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    method: ClassVar[ExtractionMethod] = ExtractionMethod.PDFPLUMBER

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
