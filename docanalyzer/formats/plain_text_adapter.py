from typing import ClassVar

from docanalyzer.extraction.models import ExtractionMethod
from docanalyzer.formats.base import BaseFormatExtractor
from docanalyzer.formats.exceptions import PlainTextExtractionError


class PlainTextAdapter(BaseFormatExtractor):
    """Decodes plain-text payloads, UTF-8 first with a cp1252 fallback."""

    method: ClassVar[ExtractionMethod] = ExtractionMethod.PLAIN_TEXT

    ENCODINGS: ClassVar[tuple[str, ...]] = ("utf-8-sig", "cp1252")

    def extract(self, data: bytes) -> str:
        if b"\x00" in data:
            raise PlainTextExtractionError("text payload contains NUL bytes; looks binary")
        text = self._decode(data)
        if not text.strip():
            raise PlainTextExtractionError("text payload is empty")
        return text

    def _decode(self, data: bytes) -> str:
        for encoding in self.ENCODINGS:
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                continue
        raise PlainTextExtractionError(
            f"could not decode text payload as any of {list(self.ENCODINGS)}"
        )
