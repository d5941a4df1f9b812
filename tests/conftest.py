import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

AGREEMENT_LINES = [
    "PROFESSIONAL SERVICES AGREEMENT",
    "This Agreement is made between Northwind Traders and Contoso Consulting.",
    "The Consultant shall provide advisory services for twelve months.",
    "The Client shall pay each invoice within thirty days of receipt.",
    "Either party may terminate this Agreement with sixty days written notice.",
]

GARBAGE_LINES = [
    "1 0 obj << /Length 44 >> stream x9c endstream endobj",
    "xref 0 5 0000000000 65535 f trailer << /Size 5 /Root 1 0 R >>",
    "%%EOF startxref 1234 /FlateDecode /Type /XObject",
]


def _pdf_from_lines(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page PDF holding a short services agreement."""
    return _pdf_from_lines([AGREEMENT_LINES])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf_from_lines([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf_from_lines([[]])


@pytest.fixture()
def garbage_pdf_bytes() -> bytes:
    """Generate a PDF whose visible text is PDF object syntax."""
    return _pdf_from_lines([GARBAGE_LINES])


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with one paragraph per agreement line."""
    document = docx.Document()
    for line in AGREEMENT_LINES:
        document.add_paragraph(line)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def agreement_text() -> str:
    return "\n".join(AGREEMENT_LINES)
