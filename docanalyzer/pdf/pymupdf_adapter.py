from typing import ClassVar

import pymupdf

from docanalyzer.extraction.models import ExtractionMethod
from docanalyzer.pdf.base import BasePdfExtractor
from docanalyzer.pdf.exceptions import PdfEncryptedError, PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    method: ClassVar[ExtractionMethod] = ExtractionMethod.PYMUPDF

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise PdfEncryptedError("PDF is encrypted and requires a password")
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
