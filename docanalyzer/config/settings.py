from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "deals"
    db_username: str = "deals"
    db_password: str = "secret"
    db_pool_max_size: int = 10

    storage_backend: str = "local"
    storage_files_root: str = "/app/files"
    storage_base_url: str = ""
    storage_bucket: str = "deal_documents"
    storage_api_key: str = ""
    storage_timeout_seconds: int = 30

    pdf_engines: list[str] = ["pdfplumber", "pymupdf"]

    ocr_provider: str = "disabled"
    ocr_base_url: str = ""
    ocr_api_key: str = ""
    ocr_timeout_seconds: int = 120

    inference_provider: str = "openai"
    inference_api_key: str = ""
    inference_base_url: str = ""
    inference_model_name: str = "gpt-4o-mini"
    inference_timeout_seconds: int = 60

    cached_text_min_length: int = 50
    extracted_text_min_length: int = 50
    standard_text_min_length: int = 20
    final_text_min_length: int = 20
    validity_max_marker_count: int = 2
    validity_min_word_ratio: float = 0.3
    analysis_max_input_chars: int = 12000
    max_key_terms: int = 8
    max_risks: int = 6

    external_call_max_attempts: int = 2
    external_call_retry_delay_seconds: float = 0.5
