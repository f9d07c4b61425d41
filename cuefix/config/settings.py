from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    detection_provider: str = "heuristic"
    detection_snippet_chars: int = 500
    detection_max_attempts: int = 2
    detection_temperature: float = 0.0

    detection_openai_api_key: str = ""
    detection_openai_model_name: str = ""
    detection_openai_timeout_seconds: int = 30

    detection_openai_compatible_api_key: str = ""
    detection_openai_compatible_model_name: str = ""
    detection_openai_compatible_timeout_seconds: int = 30
    detection_openai_compatible_base_url: str = ""

    detection_openrouter_api_key: str = ""
    detection_openrouter_model_name: str = ""
    detection_openrouter_timeout_seconds: int = 30

    detection_groq_api_key: str = ""
    detection_groq_model_name: str = ""
    detection_groq_timeout_seconds: int = 30

    detection_together_api_key: str = ""
    detection_together_model_name: str = ""
    detection_together_timeout_seconds: int = 30

    detection_deepseek_api_key: str = ""
    detection_deepseek_model_name: str = ""
    detection_deepseek_timeout_seconds: int = 30

    detection_ollama_api_key: str = "ollama"
    detection_ollama_model_name: str = ""
    detection_ollama_timeout_seconds: int = 60

    normalize_script: bool = False
    script_normalizer_engine: str = "icu"

    accepted_extensions: list[str] = [".cue", ".txt"]
    output_dir: str = "fixed"
    archive_prefix: str = "Fixed_CUE_Files"
    preview_chars: int = 200
