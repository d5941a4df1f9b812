from psycopg.rows import dict_row

from docanalyzer.database.connection import get_connection
from docanalyzer.documents.base import BaseDocumentRepository
from docanalyzer.documents.exceptions import DocumentNotFoundError
from docanalyzer.documents.models import DocumentRef, DocumentVersionRef


class DocumentsRepository(BaseDocumentRepository):
    """Read-only lookups on the documents and document_versions tables."""

    def get_document(self, document_id: str) -> DocumentRef:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, name, type, category
                    FROM documents
                    WHERE id = %s
                    """,
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document not found: {document_id}")

        return DocumentRef(
            id=str(row["id"]),
            name=row["name"] or "",
            declared_type=row["type"] or "",
            category=row["category"] or "",
        )

    def get_document_version(self, version_id: str) -> DocumentVersionRef:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, storage_path, text_content, size
                    FROM document_versions
                    WHERE id = %s
                    """,
                    (version_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document version not found: {version_id}")

        return DocumentVersionRef(
            id=str(row["id"]),
            storage_path=row["storage_path"],
            cached_text=row["text_content"],
            byte_size=row["size"] or 0,
        )
