from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentRef:
    """Read-only view of a stored document owned by the host application."""

    id: str
    name: str
    declared_type: str
    category: str = ""


@dataclass(frozen=True)
class DocumentVersionRef:
    """One binary payload of a document."""

    id: str
    storage_path: str
    cached_text: str | None = None
    byte_size: int = 0
