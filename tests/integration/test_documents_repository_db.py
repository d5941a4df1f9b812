"""DocumentsRepository against a real PostgreSQL database (skipped when unavailable)."""

import uuid

import pytest

from docanalyzer.database.repositories.documents_repository import DocumentsRepository
from docanalyzer.documents.exceptions import DocumentNotFoundError


class TestDocumentsRepositoryIntegration:
    def test_reads_document_and_version(self, seed_document: tuple[str, str]) -> None:
        document_id, version_id = seed_document
        repo = DocumentsRepository()

        document = repo.get_document(document_id)
        version = repo.get_document_version(version_id)

        assert document.id == document_id
        assert document.name == "Office Lease.pdf"
        assert document.declared_type == "application/pdf"
        assert version.storage_path == f"{document_id}/v1.pdf"
        assert version.cached_text is None
        assert version.byte_size == 2048

    def test_missing_document_raises(self, integration_pool: None) -> None:
        with pytest.raises(DocumentNotFoundError):
            DocumentsRepository().get_document(str(uuid.uuid4()))
