import json
from pathlib import Path
from typing import Dict, Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.const import (
    CONFIG_FILE_NAME, DEFAULT_EMBEDDINGS_ENDPOINT, DEFAULT_EMBEDDINGS_MODEL,
    DEFAULT_LOG_LEVEL, DEFAULT_RERANK_ENDPOINT, DEFAULT_RERANK_MODEL,
    DEFAULT_USER_AGENT, LIBRARY_LOG_LEVELS
)


class Config(BaseSettings):
    """Global configuration settings for the load tester."""

    embeddings_endpoint: str = DEFAULT_EMBEDDINGS_ENDPOINT
    embeddings_model: str = DEFAULT_EMBEDDINGS_MODEL
    rerank_endpoint: str = DEFAULT_RERANK_ENDPOINT
    rerank_model: str = DEFAULT_RERANK_MODEL
    user_agent: str = DEFAULT_USER_AGENT
    # None leaves the request open until the server answers
    request_timeout: Optional[float] = None
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        protected_namespaces=('settings_',),
        env_prefix='LOADTEST_',
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
