import re

_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
_PAGE_OF_RE = re.compile(r"^page \d+ of \d+$", re.IGNORECASE)
_PAGE_NUMBER_RE = re.compile(r"^\d+$")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def clean_text(text: str) -> str:
    """Normalize whitespace and drop page furniture.

    Runs of spaces/tabs collapse to one space, every line is trimmed, lines
    holding only a page number or "Page N of M" are removed, and 3+ newlines
    collapse to a single blank line. Cleaning clean text is a no-op.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = []
    for line in normalized.split("\n"):
        line = _HORIZONTAL_WS_RE.sub(" ", line).strip()
        if _PAGE_NUMBER_RE.match(line) or _PAGE_OF_RE.match(line):
            continue
        lines.append(line)
    joined = "\n".join(lines)
    return _EXCESS_NEWLINES_RE.sub("\n\n", joined).strip()


def word_count(text: str) -> int:
    return len(text.split())
