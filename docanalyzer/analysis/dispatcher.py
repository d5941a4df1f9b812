"""Builds the per-type prompt, calls the inference service and parses the reply."""

from dataclasses import dataclass
from pathlib import Path

from docanalyzer.analysis.client_base import BaseInferenceClient
from docanalyzer.analysis.exceptions import InferenceNetworkError
from docanalyzer.analysis.models import AnalysisRequest, AnalysisResult, AnalysisType
from docanalyzer.analysis.prompt_loader import load_system_prompt
from docanalyzer.analysis.response_parser import parse_list_response, parse_prose_response
from docanalyzer.logging.logger import Log
from docanalyzer.resilience.retry import NO_RETRY, RetryConfig, retry_with_backoff

TRUNCATION_MARKER = "\n\n[... document truncated ...]"


@dataclass(frozen=True)
class AnalysisProfile:
    """Inference and parsing parameters of one analysis type."""

    user_prompt: str
    temperature: float
    max_tokens: int
    max_items: int = 0
    min_item_length: int = 1
    max_item_length: int = 200
    split_on_commas: bool = False


DEFAULT_PROFILES: dict[AnalysisType, AnalysisProfile] = {
    AnalysisType.KEY_TERMS: AnalysisProfile(
        user_prompt="Extract key terms from this {document_type}:\n\n{text}",
        temperature=0.1,
        max_tokens=300,
        max_items=8,
        min_item_length=1,
        max_item_length=49,
        split_on_commas=True,
    ),
    AnalysisType.RISKS: AnalysisProfile(
        user_prompt="Identify significant risks in this {document_type}:\n\n{text}",
        temperature=0.2,
        max_tokens=400,
        max_items=6,
        min_item_length=11,
        max_item_length=199,
    ),
    AnalysisType.SUMMARY: AnalysisProfile(
        user_prompt="Provide a summary of this {document_type}:\n\n{text}",
        temperature=0.3,
        max_tokens=500,
    ),
}


def truncate_text(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


class AnalysisDispatcher:
    """Runs one analysis request against the inference service."""

    def __init__(
        self,
        *,
        client: BaseInferenceClient,
        model: str,
        max_input_chars: int = 12000,
        max_key_terms: int = 8,
        max_risks: int = 6,
        prompt_dir: Path | None = None,
        retry: RetryConfig = NO_RETRY,
    ) -> None:
        self._client = client
        self._model = model
        self._max_input_chars = max_input_chars
        self._retry = retry
        self._profiles = dict(DEFAULT_PROFILES)
        self._profiles[AnalysisType.KEY_TERMS] = _with_cap(
            self._profiles[AnalysisType.KEY_TERMS], max_key_terms
        )
        self._profiles[AnalysisType.RISKS] = _with_cap(
            self._profiles[AnalysisType.RISKS], max_risks
        )
        self._system_prompts = {t: load_system_prompt(t, prompt_dir) for t in AnalysisType}

    def dispatch(self, request: AnalysisRequest) -> AnalysisResult:
        """Analyze extracted text.

        Raises:
            InferenceNetworkError: if the provider cannot be reached.
            AnalysisParseError: if the response yields nothing usable.
            AnalysisError: on any other analysis failure.
        """
        profile = self._profiles[request.analysis_type]
        text = truncate_text(request.text, self._max_input_chars)
        user_prompt = profile.user_prompt.format(document_type=request.document_type, text=text)
        Log.info(
            f"Starting AI analysis: type={request.analysis_type.value}, "
            f"document_type={request.document_type}, chars={len(text)}"
        )
        Log.debug(f"Analysis prompt:\n{user_prompt}")

        raw_response = retry_with_backoff(
            self._client.create_chat_completion,
            self._retry,
            (InferenceNetworkError,),
            model=self._model,
            temperature=profile.temperature,
            max_tokens=profile.max_tokens,
            system_prompt=self._system_prompts[request.analysis_type],
            user_prompt=user_prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        if request.analysis_type is AnalysisType.SUMMARY:
            return AnalysisResult(
                document_type=request.document_type,
                summary=parse_prose_response(raw_response),
            )

        items = parse_list_response(
            raw_response,
            max_items=profile.max_items,
            min_length=profile.min_item_length,
            max_length=profile.max_item_length,
            split_on_commas=profile.split_on_commas,
        )
        Log.info(f"AI analysis complete: {len(items)} {request.analysis_type.value} items")
        if request.analysis_type is AnalysisType.KEY_TERMS:
            return AnalysisResult(document_type=request.document_type, key_terms=items)
        return AnalysisResult(document_type=request.document_type, risks=items)


def _with_cap(profile: AnalysisProfile, max_items: int) -> AnalysisProfile:
    return AnalysisProfile(
        user_prompt=profile.user_prompt,
        temperature=profile.temperature,
        max_tokens=profile.max_tokens,
        max_items=max_items,
        min_item_length=profile.min_item_length,
        max_item_length=profile.max_item_length,
        split_on_commas=profile.split_on_commas,
    )
