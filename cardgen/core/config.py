from typing import Optional
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeepSeekSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    api_key: Optional[str] = Field(default=None, alias="DEEPSEEK_API_KEY")
    base_url: str = Field(default="https://api.deepseek.com", alias="DEEPSEEK_BASE_URL")
    model: str = Field(default="deepseek-chat", alias="DEEPSEEK_MODEL")


class OpenAISettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    api_key: Optional[str] = Field(default=None, alias="OPENAI_API_KEY")
    base_url: str = Field(default="https://api.openai.com/v1", alias="OPENAI_BASE_URL")
    model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")


class GenerationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    request_timeout: float = Field(default=60.0, alias="REQUEST_TIMEOUT_SECONDS")
    progress_interval: float = Field(default=0.5, alias="PROGRESS_INTERVAL_SECONDS")
    # "en" or "zh"
    locale: str = Field(default="en", alias="MESSAGES_LOCALE")


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="cardgen", alias="APP_NAME")
    version: str = Field(default="v1", alias="API_VERSION")
    port: int = Field(default=9000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    deepseek: DeepSeekSettings = Field(default_factory=lambda: DeepSeekSettings())
    openai: OpenAISettings = Field(default_factory=lambda: OpenAISettings())
    generation: GenerationSettings = Field(
        default_factory=lambda: GenerationSettings()
    )

    # Provider used when a caller does not name one: "deepseek" or "openai"
    model_provider: str = Field(default="deepseek", alias="MODEL_PROVIDER")


settings = Settings()
