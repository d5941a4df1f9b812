from abc import ABC, abstractmethod

from docanalyzer.documents.models import DocumentRef, DocumentVersionRef


class BaseDocumentRepository(ABC):
    """Contract for the metadata collaborator supplying documents and versions."""

    @abstractmethod
    def get_document(self, document_id: str) -> DocumentRef:
        """Return document metadata.

        Raises:
            DocumentNotFoundError: if no document has this ID.
        """

    @abstractmethod
    def get_document_version(self, version_id: str) -> DocumentVersionRef:
        """Return version metadata, including previously extracted text.

        Raises:
            DocumentNotFoundError: if no version has this ID.
        """
