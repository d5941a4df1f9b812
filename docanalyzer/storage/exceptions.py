class StorageError(Exception):
    """Base exception for blob downloads. Fatal for an extraction run."""


class BlobNotFoundError(StorageError):
    """Raised when no blob exists at the storage path."""


class StorageTimeoutError(StorageError):
    """Raised when the object store does not answer within the timeout."""


class UnsupportedStorageBackendError(StorageError):
    """Raised when settings name an unknown storage backend."""
