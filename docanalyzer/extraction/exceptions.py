class ExtractionError(Exception):
    """Raised when no extraction stage produced acceptable text."""
