import pytest
from pydantic import ValidationError

from docanalyzer.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_pdf_engine_order(self) -> None:
        s = Settings()
        assert s.pdf_engines == ["pdfplumber", "pymupdf"]

    def test_ocr_disabled_by_default(self) -> None:
        s = Settings()
        assert s.ocr_provider == "disabled"

    def test_default_inference_provider(self) -> None:
        s = Settings()
        assert s.inference_provider == "openai"

    def test_default_thresholds(self) -> None:
        s = Settings()
        assert s.cached_text_min_length == 50
        assert s.extracted_text_min_length == 50
        assert s.standard_text_min_length == 20
        assert s.final_text_min_length == 20
        assert s.validity_max_marker_count == 2
        assert s.validity_min_word_ratio == 0.3
        assert s.max_key_terms == 8
        assert s.max_risks == 6


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        s = Settings()
        assert s.db_host == "db.example.com"

    def test_loads_pdf_engines_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDF_ENGINES", '["pymupdf", "pdfplumber"]')
        s = Settings()
        assert s.pdf_engines == ["pymupdf", "pdfplumber"]

    def test_loads_validity_ratio(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VALIDITY_MIN_WORD_RATIO", "0.5")
        s = Settings()
        assert s.validity_min_word_ratio == 0.5


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_threshold_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FINAL_TEXT_MIN_LENGTH", "abc")
        with pytest.raises(ValidationError):
            Settings()
