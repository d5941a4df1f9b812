class DocumentLookupError(Exception):
    """Base exception for document metadata lookups."""


class DocumentNotFoundError(DocumentLookupError):
    """Raised when a document or one of its versions does not exist."""
