from dataclasses import dataclass


@dataclass(frozen=True)
class OcrResponse:
    """Normalized reply of the OCR collaborator."""

    success: bool
    text: str | None = None
    error: str | None = None
