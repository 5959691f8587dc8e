import logging

import httpx

from app.core.llm.base import BaseLLM, LLMError
from app.core.llm.schemas import GenerateConfig, LLMResponse

logger = logging.getLogger(__name__)


class OllamaProvider(BaseLLM):
    """Client for the Ollama ``/api/generate`` endpoint (non-streaming)."""

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout: float | None = 120.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = timeout
        self._transport = transport

    @property
    def model(self) -> str:
        return self._model

    def _split_messages(self, messages: list[dict]) -> tuple[str | None, str]:
        system_parts: list[str] = []
        prompt_parts: list[str] = []

        for message in messages:
            content = message.get("content", "")
            if not content:
                continue
            if message.get("role") == "system":
                system_parts.append(str(content))
            else:
                prompt_parts.append(str(content))

        system_text = "\n\n".join(system_parts) if system_parts else None
        return system_text, "\n\n".join(prompt_parts)

    def _build_options(self, config: GenerateConfig) -> dict:
        options: dict = {"temperature": config.temperature}
        if config.seed is not None:
            options["seed"] = config.seed
        if config.top_p is not None:
            options["top_p"] = config.top_p
        if config.max_tokens is not None:
            options["num_predict"] = config.max_tokens
        if config.stop is not None:
            options["stop"] = config.stop
        return options

    def _build_payload(self, messages: list[dict], config: GenerateConfig) -> dict:
        system_text, prompt = self._split_messages(messages)
        payload: dict = {
            "model": self._model,
            "prompt": prompt,
            "stream": False,
            "options": self._build_options(config),
        }
        if system_text:
            payload["system"] = system_text
        if config.response_format:
            payload["format"] = config.response_format
        return payload

    def generate(self, messages: list[dict], config: GenerateConfig | None = None) -> LLMResponse:
        config = config or GenerateConfig()
        payload = self._build_payload(messages, config)

        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.post("/api/generate", json=payload)
        except httpx.TimeoutException as exc:
            raise LLMError(
                f"Ollama did not answer within {self._timeout}s ({self._base_url})"
            ) from exc
        except httpx.HTTPError as exc:
            raise LLMError(f"Ollama unreachable at {self._base_url}: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {"raw": response.text}
        if not isinstance(body, dict):
            body = {"raw": body}

        if response.status_code >= 400:
            detail = body.get("error") or body.get("raw") or response.reason_phrase
            raise LLMError(f"Ollama generate failed ({response.status_code}): {detail}")

        usage = {}
        if "prompt_eval_count" in body or "eval_count" in body:
            prompt_tokens = int(body.get("prompt_eval_count") or 0)
            completion_tokens = int(body.get("eval_count") or 0)
            usage = {
                "prompt_tokens": prompt_tokens,
                "completion_tokens": completion_tokens,
                "total_tokens": prompt_tokens + completion_tokens,
            }
        logger.debug("Ollama %s answered, usage=%s", self._model, usage)

        text = body.get("response")
        return LLMResponse(text=text if isinstance(text, str) else "", usage=usage)
