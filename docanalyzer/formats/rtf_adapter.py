"""RTF to text by pattern stripping.

Not an RTF parser: groups that never carry body text are dropped, paragraph
controls become newlines, hex escapes are decoded and every other control
word, control symbol and brace is removed.
"""

import re
from typing import ClassVar

from docanalyzer.extraction.models import ExtractionMethod
from docanalyzer.formats.base import BaseFormatExtractor
from docanalyzer.formats.exceptions import RtfExtractionError


class RtfAdapter(BaseFormatExtractor):
    """Strips RTF markup with regular expressions."""

    method: ClassVar[ExtractionMethod] = ExtractionMethod.RTF

    # Up to two levels of nesting inside an ignorable group.
    _IGNORABLE_GROUP_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\{\\(?:\*|fonttbl|colortbl|stylesheet|info|pict|header|footer)"
        r"(?:[^{}]|\{(?:[^{}]|\{[^{}]*\})*\})*\}"
    )
    _CONTROL_NEWLINE_RE: ClassVar[re.Pattern[str]] = re.compile(r"(\\[a-zA-Z]+(?:-?\d+)?)\r?\n")
    _UNICODE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\\u(-?\d+) ?(?:\\'[0-9a-fA-F]{2}|\?)?")
    _PARAGRAPH_RE: ClassVar[re.Pattern[str]] = re.compile(r"\\(?:par|line|sect|page)\b ?")
    _TAB_RE: ClassVar[re.Pattern[str]] = re.compile(r"\\tab\b ?")
    _HEX_ESCAPE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\\'([0-9a-fA-F]{2})")
    _CONTROL_WORD_RE: ClassVar[re.Pattern[str]] = re.compile(r"\\[a-zA-Z]+(?:-?\d+)? ?")
    _CONTROL_SYMBOL_RE: ClassVar[re.Pattern[str]] = re.compile(r"\\[^a-zA-Z0-9]")

    # Escaped literals survive brace and control stripping via placeholders.
    _LITERALS: ClassVar[dict[str, str]] = {
        "\\\\": "\x01",
        "\\{": "\x02",
        "\\}": "\x03",
    }

    def extract(self, data: bytes) -> str:
        content = data.decode("utf-8", errors="replace").lstrip("\ufeff")
        if not content.lstrip().startswith("{\\rtf"):
            raise RtfExtractionError("payload does not start with an RTF header")
        text = self._strip(content)
        if not text.strip():
            raise RtfExtractionError("RTF document contains no text")
        return text

    def _strip(self, content: str) -> str:
        for literal, placeholder in self._LITERALS.items():
            content = content.replace(literal, placeholder)
        content = self._IGNORABLE_GROUP_RE.sub("", content)
        content = self._CONTROL_NEWLINE_RE.sub(r"\1 ", content)
        content = content.replace("\r", "").replace("\n", "")
        content = self._PARAGRAPH_RE.sub("\n", content)
        content = self._TAB_RE.sub("\t", content)
        content = self._UNICODE_RE.sub(self._decode_unicode, content)
        content = self._HEX_ESCAPE_RE.sub(self._decode_hex, content)
        content = self._CONTROL_WORD_RE.sub("", content)
        content = self._CONTROL_SYMBOL_RE.sub("", content)
        content = content.replace("{", "").replace("}", "")
        return (
            content.replace("\x01", "\\")
            .replace("\x02", "{")
            .replace("\x03", "}")
            .strip()
        )

    @staticmethod
    def _decode_unicode(match: re.Match[str]) -> str:
        code = int(match.group(1))
        return chr(code + 65536 if code < 0 else code)

    @staticmethod
    def _decode_hex(match: re.Match[str]) -> str:
        return bytes([int(match.group(1), 16)]).decode("cp1252", errors="replace")
