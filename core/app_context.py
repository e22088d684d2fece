from dataclasses import dataclass, field
from typing import Optional

from core.catalog import JOB_PROFILES
from core.config_loader import AppConfig, LlmConfig
from core.llm import OpenAIService, TextGenerationProvider
from core.scorer import RecommendationService


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    DB access is obtained per request via profile_uow(); nothing here
    holds a session. The text provider is built on first use so that
    scoring works without LLM credentials.
    """
    config: AppConfig
    recommendation_service: RecommendationService
    _text_provider: Optional[TextGenerationProvider] = field(default=None, repr=False)

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Wired AppContext instance
        """
        return cls(
            config=config,
            recommendation_service=RecommendationService(JOB_PROFILES),
        )

    @property
    def text_provider(self) -> TextGenerationProvider:
        if self._text_provider is None:
            self._text_provider = self._build_text_provider(self.config.llm or LlmConfig())
        return self._text_provider

    @staticmethod
    def _build_text_provider(llm_config: LlmConfig) -> OpenAIService:
        """Build OpenAI service from LLM configuration."""
        model_config = {
            'model': llm_config.model,
            'temperature': llm_config.temperature,
            'max_tokens': llm_config.max_tokens,
        }

        return OpenAIService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            model_config=model_config,
            timeout=llm_config.request_timeout_seconds,
        )
