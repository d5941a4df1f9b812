class AnalysisError(Exception):
    """Raised when document analysis fails."""


class InferenceNetworkError(AnalysisError):
    """Raised when the inference provider call fails due to network/infrastructure issues."""


class InferenceTimeoutError(InferenceNetworkError):
    """Raised when the inference provider does not answer within the timeout."""


class AnalysisParseError(AnalysisError):
    """Raised when neither JSON nor delimiter parsing yields usable output."""
