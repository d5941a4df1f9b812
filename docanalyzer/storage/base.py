from abc import ABC, abstractmethod


class BaseBlobStorage(ABC):
    """Contract for the object-storage collaborator."""

    @abstractmethod
    def download(self, storage_path: str) -> bytes:
        """Return the full payload stored at ``storage_path``.

        Raises:
            StorageError: on any failure; callers treat it as fatal.
        """
