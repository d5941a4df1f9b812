import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from docanalyzer.config.settings import Settings
from docanalyzer.database.connection import close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "deals_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def seed_document(db_conn: psycopg.Connection[Any]) -> Generator[tuple[str, str], None, None]:
    """Insert a document with one version and delete both afterwards."""
    document_id = str(uuid.uuid4())
    version_id = str(uuid.uuid4())
    try:
        with db_conn.cursor() as cur:
            cur.execute(
                "INSERT INTO documents (id, name, type, category) VALUES (%s, %s, %s, %s)",
                (document_id, "Office Lease.pdf", "application/pdf", "legal"),
            )
            cur.execute(
                """
                INSERT INTO document_versions (id, document_id, storage_path, text_content, size)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (version_id, document_id, f"{document_id}/v1.pdf", None, 2048),
            )
    except psycopg.Error as e:
        pytest.skip(f"documents schema not available: {e}")
    try:
        yield document_id, version_id
    finally:
        with db_conn.cursor() as cur:
            cur.execute("DELETE FROM document_versions WHERE id = %s", (version_id,))
            cur.execute("DELETE FROM documents WHERE id = %s", (document_id,))


@pytest.fixture
def files_root(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def pipeline_settings(files_root: Path) -> Settings:
    return Settings(
        storage_backend="local",
        storage_files_root=str(files_root),
        ocr_provider="disabled",
        inference_api_key="test-key",
    )
