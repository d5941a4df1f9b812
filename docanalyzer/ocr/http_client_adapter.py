from typing import Any

import httpx

from docanalyzer.ocr.client_base import BaseOcrClient
from docanalyzer.ocr.exceptions import OcrError, OcrTimeoutError
from docanalyzer.ocr.models import OcrResponse


def parse_ocr_response(payload: Any) -> OcrResponse:
    """Normalize the service JSON ``{success, text?, error?}``."""
    if not isinstance(payload, dict):
        raise OcrError("OCR service returned a non-object JSON body")
    success = bool(payload.get("success"))
    text = payload.get("text")
    if text is not None and not isinstance(text, str):
        raise OcrError("OCR service returned non-string text")
    if success:
        return OcrResponse(success=True, text=text)
    error = payload.get("error") or "Unknown OCR error"
    return OcrResponse(success=False, error=str(error))


class HttpOcrClientAdapter(BaseOcrClient):
    """Posts base64 documents to an HTTP OCR service."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str = "",
        timeout_seconds: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = base_url
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._headers = headers
        self._timeout = timeout_seconds
        self._transport = transport

    def extract_text(self, *, file_base64: str, mime_type: str, file_name: str) -> OcrResponse:
        body = {"fileBase64": file_base64, "mimeType": mime_type, "fileName": file_name}
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(self._url, json=body, headers=self._headers)
        except httpx.TimeoutException as exc:
            raise OcrTimeoutError(f"OCR service timed out after {self._timeout}s") from exc
        except httpx.HTTPError as exc:
            raise OcrError(f"OCR service network error: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            detail = payload.get("error") if isinstance(payload, dict) else None
            raise OcrError(
                f"OCR service error: {response.status_code} {response.reason_phrase}"
                + (f" ({detail})" if detail else "")
            )
        if payload is None:
            raise OcrError("OCR service returned invalid JSON")
        return parse_ocr_response(payload)
