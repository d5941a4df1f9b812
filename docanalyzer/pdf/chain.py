from collections.abc import Sequence

from docanalyzer.extraction.models import StrategyResult
from docanalyzer.logging.logger import Log
from docanalyzer.pdf.base import BasePdfExtractor
from docanalyzer.text.screening import TextScreen


class PdfStrategyChain:
    """Tries PDF engines in order; the first output that passes screening wins.

    A failing engine never blocks the next one. When every engine fails, the
    returned error names each engine with its rejection reason.
    """

    def __init__(self, engines: Sequence[BasePdfExtractor], screen: TextScreen) -> None:
        if len(engines) < 2:
            raise ValueError("PdfStrategyChain needs at least two engines")
        self._engines = list(engines)
        self._screen = screen

    @property
    def engines(self) -> list[BasePdfExtractor]:
        return list(self._engines)

    def extract(self, pdf_bytes: bytes) -> StrategyResult:
        reasons: list[str] = []
        for engine in self._engines:
            name = engine.method.value
            result = engine.try_extract(pdf_bytes)
            if result.ok:
                result = self._screen.screen(result.text, engine.method)
            if result.ok:
                Log.info(f"PDF engine {name} accepted ({len(result.text or '')} chars)")
                return result
            Log.warning(f"PDF engine {name} rejected: {result.error}")
            reasons.append(f"{name}: {result.error}")
        return StrategyResult.failure("; ".join(reasons))
