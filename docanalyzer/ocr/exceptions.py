class OcrError(Exception):
    """Raised when the OCR service call fails."""


class OcrTimeoutError(OcrError):
    """Raised when the OCR service does not answer within the timeout."""
