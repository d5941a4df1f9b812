"""Keyword-based guess of the legal document type.

Filename keywords win over content keywords; the first matching rule in each
list decides.
"""

DEFAULT_DOCUMENT_TYPE = "Legal Document"

_FILENAME_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("contract", "agreement"), "Contract"),
    (("nda", "non-disclosure"), "Non-Disclosure Agreement"),
    (("lease", "rental"), "Lease Agreement"),
)

_CONTENT_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("non-disclosure", "confidential"), "Non-Disclosure Agreement"),
    (("employment", "employee"), "Employment Agreement"),
    (("lease", "rental"), "Lease Agreement"),
    (("purchase", "sale"), "Purchase Agreement"),
    (("service", "services"), "Service Agreement"),
)


def infer_document_type(file_name: str, text: str) -> str:
    lowered_name = (file_name or "").lower()
    for keywords, document_type in _FILENAME_RULES:
        if any(k in lowered_name for k in keywords):
            return document_type
    lowered_text = text.lower()
    for keywords, document_type in _CONTENT_RULES:
        if any(k in lowered_text for k in keywords):
            return document_type
    return DEFAULT_DOCUMENT_TYPE
