from abc import ABC, abstractmethod

from app.core.llm.schemas import GenerateConfig, LLMResponse


class LLMError(RuntimeError):
    """Raised when the inference backend cannot produce a response."""


class BaseLLM(ABC):
    @abstractmethod
    def generate(self, messages: list[dict], config: GenerateConfig | None = None) -> LLMResponse:
        """Generate a response from the LLM based on the provided messages."""
        pass
