from app.core.llm.base import BaseLLM, LLMError
from app.core.llm.service import clear_llm_cache, create_llm

__all__ = ["BaseLLM", "LLMError", "clear_llm_cache", "create_llm"]
