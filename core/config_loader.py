import yaml
import os
import logging
from typing import Optional
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///career_compass.db"
    echo: bool = False


class LlmConfig(BaseModel):
    base_url: Optional[str] = None  # OpenAI-compatible endpoint; None = api.openai.com
    api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_tokens: Optional[int] = 600
    request_timeout_seconds: float = 60.0


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel):
    # Namespace for stored profiles, so several deployments can share one database
    app_id: str = "default-app-id"
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    llm: LlmConfig = Field(default_factory=LlmConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _set_nested(data: dict, section: str, key: str, value) -> None:
    if section not in data or data[section] is None:
        data[section] = {}
    data[section][key] = value


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from a subdirectory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file found; using defaults")

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        _set_nested(data, 'database', 'url', env_db_url)

    # Allow env var overrides for the LLM endpoint
    env_llm_base_url = os.environ.get("LLM_BASE_URL")
    if env_llm_base_url:
        _set_nested(data, 'llm', 'base_url', env_llm_base_url)

    env_api_key = os.environ.get("OPENAI_API_KEY")
    if env_api_key:
        _set_nested(data, 'llm', 'api_key', env_api_key)

    env_llm_model = os.environ.get("LLM_MODEL")
    if env_llm_model:
        _set_nested(data, 'llm', 'model', env_llm_model)

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        _set_nested(data, 'web', 'host', os.environ['WEB_HOST'])
    if 'WEB_PORT' in os.environ:
        _set_nested(data, 'web', 'port', int(os.environ['WEB_PORT']))

    env_app_id = os.environ.get("CAREER_COMPASS_APP_ID")
    if env_app_id:
        data['app_id'] = env_app_id

    return AppConfig(**data)
