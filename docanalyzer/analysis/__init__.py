from docanalyzer.analysis.dispatcher import AnalysisDispatcher
from docanalyzer.analysis.factory import AnalysisDispatcherFactory
from docanalyzer.analysis.models import AnalysisOutcome, AnalysisRequest, AnalysisResult, AnalysisType

__all__ = [
    "AnalysisDispatcher",
    "AnalysisDispatcherFactory",
    "AnalysisOutcome",
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisType",
]
