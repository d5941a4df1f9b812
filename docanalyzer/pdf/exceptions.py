class PdfExtractionError(Exception):
    """Raised when a PDF engine cannot extract text."""


class PdfEncryptedError(PdfExtractionError):
    """Raised when a PDF requires a password to read."""
