from pydantic import BaseModel


class GenerateConfig(BaseModel):
    temperature: float = 1.0
    seed: int | None = None
    response_format: str | None = None
    max_tokens: int | None = None
    top_p: float | None = None
    stop: list[str] | None = None


class LLMResponse(BaseModel):
    text: str
    usage: dict
