from pathlib import Path

from docanalyzer.config.settings import Settings
from docanalyzer.storage.base import BaseBlobStorage
from docanalyzer.storage.exceptions import UnsupportedStorageBackendError
from docanalyzer.storage.http_adapter import HttpBlobStorage
from docanalyzer.storage.local_adapter import LocalBlobStorage


class BlobStorageFactory:
    """Creates the configured blob storage adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStorage:
        backend = settings.storage_backend.lower()
        if backend == "local":
            return LocalBlobStorage(files_root=Path(settings.storage_files_root))
        if backend == "http":
            if not settings.storage_base_url.strip():
                raise ValueError("storage_base_url is required for storage_backend=http")
            return HttpBlobStorage(
                base_url=settings.storage_base_url,
                bucket=settings.storage_bucket,
                api_key=settings.storage_api_key,
                timeout_seconds=settings.storage_timeout_seconds,
            )
        raise UnsupportedStorageBackendError(
            f"storage_backend '{settings.storage_backend}' is not supported"
        )
