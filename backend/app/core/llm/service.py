from typing import Dict, Tuple

from app.core.config import settings
from app.core.llm.base import BaseLLM
from app.core.llm.providers.ollama import OllamaProvider


LLM_REGISTRY = {
    "ollama": OllamaProvider,
}

# cache instance per (provider, model, base_url, timeout)
_instances: Dict[Tuple[str, str, str, float | None], BaseLLM] = {}


def create_llm(
    provider: str | None = None,
    model: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
    use_cache: bool = True,
) -> BaseLLM:

    provider = provider or "ollama"
    model = model or settings.OLLAMA_DEFAULT_MODEL
    base_url = base_url or settings.OLLAMA_HOST
    timeout = timeout if timeout is not None else settings.OLLAMA_TIMEOUT_SECONDS

    if provider not in LLM_REGISTRY:
        raise ValueError(f"Unsupported LLM provider: {provider}")
    key = (provider, model, base_url, timeout)

    if use_cache and key in _instances:
        return _instances[key]

    llm_class = LLM_REGISTRY[provider]

    instance = llm_class(
        base_url=base_url,
        model=model,
        timeout=timeout,
    )

    if use_cache:
        _instances[key] = instance

    return instance


def clear_llm_cache() -> None:
    """Clear cached LLM instances so next call picks up new config."""
    _instances.clear()
