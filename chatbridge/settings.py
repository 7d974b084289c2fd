from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatbridge.adapters.backend.catalog import DEFAULT_CATALOG_PATH
from chatbridge.adapters.llm.constants import BackendKind


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    ANTHROPIC_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    ANTHROPIC_API_ENDPOINT: Optional[str] = None
    OPENAI_API_ENDPOINT: Optional[str] = None
    BACKEND: BackendKind = BackendKind.DUMMY
    REQUEST_TIMEOUT_S: float = 60
    LLM_MAX_RETRIES: int = 2
    MODELS_CATALOG_PATH: str = str(DEFAULT_CATALOG_PATH)
    LOG_LEVEL: str = 'INFO'
    LOG_DIR: Optional[str] = None

    @field_validator('BACKEND', mode='before')
    def default_blank_backend(cls, v):
        if v == '' or v is None:
            return BackendKind.DUMMY
        return v

    @field_validator(
        'ANTHROPIC_API_KEY',
        'OPENAI_API_KEY',
        'ANTHROPIC_API_ENDPOINT',
        'OPENAI_API_ENDPOINT',
        'LOG_DIR',
        mode='before',
    )
    def allow_blank(cls, v):
        if v == '' or v is None:
            return None
        return v


settings = Settings()
