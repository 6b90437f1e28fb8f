from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAIConfig(BaseSettings):
    """OpenAI transcription and chat configuration."""

    api_key: SecretStr | None = Field(
        default=None,
        validation_alias="OPENAI_API_KEY",
    )
    base_url: Optional[str] = Field(
        default=None,
        validation_alias="OPENAI_BASE_URL",
    )
    transcription_model: str = Field(
        default="whisper-1",
        validation_alias="OPENAI_TRANSCRIPTION_MODEL",
    )
    chat_model: str = Field(
        default="gpt-4o",
        validation_alias="OPENAI_CHAT_MODEL",
    )
    max_tokens: int = Field(
        default=1000,
        validation_alias="OPENAI_MAX_TOKENS",
        ge=1,
        le=4096,
    )
    temperature: float = Field(
        default=0.8,
        validation_alias="OPENAI_TEMPERATURE",
        ge=0.0,
        le=2.0,
    )

    @property
    def configured(self) -> bool:
        """True when a non-empty credential is available."""
        return bool(self.api_key and self.api_key.get_secret_value().strip())

    model_config = SettingsConfigDict(
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


class UploadConfig(BaseSettings):
    """Temporary audio storage configuration"""

    dir: str = "uploads"
    max_bytes: int = Field(default=25 * 1024 * 1024, ge=1)
    extension: str = ".webm"

    model_config = SettingsConfigDict(
        env_prefix="UPLOAD_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "The Truth Machine"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    log_file: str = "logs/app.log"
    pipeline_log_file: str = "logs/analysis_pipeline.log"
    transcript_log_file: str = "logs/transcripts.log"

    # OpenAI
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)

    # Uploads
    uploads: UploadConfig = Field(default_factory=UploadConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
