"""Statistical check separating readable text from format-internal noise.

Some PDFs force-extract to their own object syntax (stream markers, xref
tables, compression filter declarations) instead of page text. Two signals
catch most of these:

1. How many distinct internal-structure markers occur in the text.
2. Which share of the longer tokens look like ordinary words.

Both thresholds are calibratable defaults, not derived constants.
"""

import re
from typing import ClassVar


class TextValidityHeuristic:
    """Classifies extracted text as real content or format garbage."""

    DEFAULT_MARKERS: ClassVar[tuple[str, ...]] = (
        "endstreamendobj",
        "endstream",
        "xpacket",
        "filter/flate",
        "obj",
        "endobj",
        "stream",
        "xref",
        "trailer",
    )

    _WORD_RE: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")

    def __init__(
        self,
        *,
        max_marker_count: int = 2,
        min_word_ratio: float = 0.3,
        min_token_length: int = 3,
        markers: tuple[str, ...] | None = None,
    ) -> None:
        self._max_marker_count = max_marker_count
        self._min_word_ratio = min_word_ratio
        self._min_token_length = min_token_length
        self._markers = tuple(m.lower() for m in (markers or self.DEFAULT_MARKERS))

    def is_valid(self, text: str) -> bool:
        if self.count_markers(text) > self._max_marker_count:
            return False
        return self.word_ratio(text) >= self._min_word_ratio

    def count_markers(self, text: str) -> int:
        """Number of distinct internal-structure markers present."""
        lowered = text.lower()
        return sum(1 for marker in self._markers if marker in lowered)

    def word_ratio(self, text: str) -> float:
        """Share of candidate tokens that are plain alphanumeric words.

        Returns 0.0 when the text has no candidate tokens at all.
        """
        candidates = [t for t in text.split() if len(t) >= self._min_token_length]
        if not candidates:
            return 0.0
        meaningful = sum(1 for t in candidates if self._WORD_RE.match(t))
        return meaningful / len(candidates)
