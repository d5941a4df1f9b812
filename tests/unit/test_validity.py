import pytest

from docanalyzer.text.validity import TextValidityHeuristic

READABLE = (
    "This Agreement is made between the Client and the Consultant and sets out "
    "the terms under which consulting services will be provided"
)
PDF_SYNTAX = "1 0 obj << /Length 44 >> stream x9c endstream endobj xref trailer"


class TestIsValid:
    def test_accepts_readable_prose(self) -> None:
        assert TextValidityHeuristic().is_valid(READABLE)

    def test_rejects_pdf_object_syntax(self) -> None:
        assert not TextValidityHeuristic().is_valid(PDF_SYNTAX)

    def test_rejects_text_without_candidate_tokens(self) -> None:
        assert not TextValidityHeuristic().is_valid("a b c 1 2 3")

    def test_rejects_symbol_noise(self) -> None:
        noise = " ".join(["@#$%", "12-34", "/Type", "<<>>", "0x9c"] * 10)
        assert not TextValidityHeuristic().is_valid(noise)

    def test_two_markers_are_tolerated(self) -> None:
        text = READABLE + " the stream of payments is recorded as an object"
        heuristic = TextValidityHeuristic()
        assert heuristic.count_markers(text) == 2
        assert heuristic.is_valid(text)

    def test_three_markers_reject_even_readable_text(self) -> None:
        text = READABLE + " stream obj trailer"
        assert not TextValidityHeuristic().is_valid(text)

    def test_thresholds_are_configurable(self) -> None:
        text = READABLE + " stream obj trailer"
        assert TextValidityHeuristic(max_marker_count=3).is_valid(text)


class TestCountMarkers:
    def test_is_case_insensitive(self) -> None:
        assert TextValidityHeuristic().count_markers("XREF Trailer") == 2

    def test_counts_distinct_markers_once(self) -> None:
        assert TextValidityHeuristic().count_markers("xref xref xref") == 1

    def test_custom_markers(self) -> None:
        heuristic = TextValidityHeuristic(markers=("lorem",))
        assert heuristic.count_markers("Lorem ipsum xref") == 1


class TestWordRatio:
    def test_ignores_short_tokens(self) -> None:
        assert TextValidityHeuristic().word_ratio("a an Contract") == 1.0

    def test_counts_punctuated_tokens_as_non_words(self) -> None:
        ratio = TextValidityHeuristic().word_ratio("Payment terms apply, always.")
        assert ratio == pytest.approx(0.5)

    def test_empty_text_is_zero(self) -> None:
        assert TextValidityHeuristic().word_ratio("") == 0.0
