"""
LLM Provider Interface - Abstract base for text generation providers.

This module defines the interface for LLM services (OpenAI, Ollama, Gemini, etc.).
"""
from abc import ABC, abstractmethod
from typing import Optional


class TextGenerationProvider(ABC):
    """
    Abstract Interface for free-text generation providers.
    """

    @abstractmethod
    def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> Optional[str]:
        """
        Generate free text for a natural-language prompt.

        Returns None when the provider answered without usable content.
        """
        pass
