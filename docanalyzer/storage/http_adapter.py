from urllib.parse import quote

import httpx

from docanalyzer.storage.base import BaseBlobStorage
from docanalyzer.storage.exceptions import BlobNotFoundError, StorageError, StorageTimeoutError


class HttpBlobStorage(BaseBlobStorage):
    """Downloads blobs from an HTTP object store as ``{base_url}/{bucket}/{path}``."""

    def __init__(
        self,
        *,
        base_url: str,
        bucket: str,
        api_key: str = "",
        timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._bucket = bucket.strip("/")
        self._headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._timeout = timeout_seconds
        self._transport = transport

    def download(self, storage_path: str) -> bytes:
        url = f"{self._base_url}/{self._bucket}/{quote(storage_path.lstrip('/'))}"
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url, headers=self._headers)
        except httpx.TimeoutException as exc:
            raise StorageTimeoutError(
                f"Download of {storage_path} timed out after {self._timeout}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise StorageError(f"Failed to download {storage_path}: {exc}") from exc

        if response.status_code == 404:
            raise BlobNotFoundError(f"Blob not found: {storage_path}")
        if response.status_code >= 400:
            raise StorageError(
                f"Failed to download {storage_path}: "
                f"{response.status_code} {response.reason_phrase}"
            )
        return response.content
