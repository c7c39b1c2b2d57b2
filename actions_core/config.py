"""
Shared configuration for actions_core.

Uses pydantic-settings for environment-based configuration.
"""

import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_FILE = ".env.local" if os.path.exists(".env.local") else ".env"

# Context that carries conversation data between Dialogflow turns
APP_DATA_CONTEXT = "_actions_on_google"
APP_DATA_CONTEXT_LIFESPAN = 99


class CoreSettings(BaseSettings):
    """Serializer configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="ACTIONS_",
    )

    # Library metadata
    include_version_metadata: bool = False
    library_language: str = "python"

    # Conversation data context
    app_data_context: str = APP_DATA_CONTEXT
    app_data_context_lifespan: int = APP_DATA_CONTEXT_LIFESPAN


@lru_cache
def get_core_settings() -> CoreSettings:
    """Get cached core settings instance."""
    return CoreSettings()
