from enum import Enum
from pathlib import PurePosixPath


class DocumentFormat(str, Enum):
    PLAIN_TEXT = "plain_text"
    RTF = "rtf"
    DOCX = "docx"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"


DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_MIME_TYPES: dict[str, DocumentFormat] = {
    "text/plain": DocumentFormat.PLAIN_TEXT,
    "text/markdown": DocumentFormat.PLAIN_TEXT,
    "application/rtf": DocumentFormat.RTF,
    "text/rtf": DocumentFormat.RTF,
    DOCX_MIME_TYPE: DocumentFormat.DOCX,
    "application/pdf": DocumentFormat.PDF,
}

_EXTENSIONS: dict[str, DocumentFormat] = {
    ".txt": DocumentFormat.PLAIN_TEXT,
    ".md": DocumentFormat.PLAIN_TEXT,
    ".rtf": DocumentFormat.RTF,
    ".docx": DocumentFormat.DOCX,
    ".pdf": DocumentFormat.PDF,
}


def detect_format(declared_type: str | None, file_name: str | None = None) -> DocumentFormat:
    """Pick the format family from the mime type, then the file extension."""
    mime = (declared_type or "").split(";", 1)[0].strip().lower()
    by_mime = _MIME_TYPES.get(mime)
    if by_mime is not None:
        return by_mime
    suffix = PurePosixPath((file_name or "").lower()).suffix
    return _EXTENSIONS.get(suffix, DocumentFormat.UNSUPPORTED)


def looks_like_pdf(data: bytes) -> bool:
    return data[:4] == b"%PDF"
