class FormatExtractionError(Exception):
    """Base exception for non-PDF format extractors."""


class PlainTextExtractionError(FormatExtractionError):
    """Raised when a text payload cannot be decoded."""


class RtfExtractionError(FormatExtractionError):
    """Raised when an RTF payload is not RTF or holds no text."""


class DocxExtractionError(FormatExtractionError):
    """Raised when a DOCX package cannot be opened or read."""


class UnsupportedFormatError(FormatExtractionError):
    """Raised when no extractor handles the declared type."""
