import asyncio
import logging
from typing import Any

from app.core.config import Settings
from app.core.llm import LLMError, create_llm
from app.core.llm.schemas import GenerateConfig
from app.modules.comparison.documents import read_document
from app.modules.comparison.exceptions import (
    ResponseFormatError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from app.modules.comparison.extractor import extract_json_object
from app.modules.comparison.prompts import build_strict_prompt
from app.modules.comparison.schemas import ComparisonResult

logger = logging.getLogger(__name__)

DEFAULT_REASON = "Diferencias encontradas"


def normalize_verdict(parsed: dict[str, Any]) -> ComparisonResult:
    if not parsed.get("igual") or not parsed.get("diferencias"):
        raise ResponseFormatError("Formato de respuesta inválido")

    differences = parsed["diferencias"]
    if not isinstance(differences, list):
        differences = [differences]

    reason = parsed.get("razon") or DEFAULT_REASON
    return ComparisonResult(
        igual="SI" if parsed["igual"] == "SI" else "NO",
        razon=str(reason),
        diferencias=differences,
    )


def _generate_text(settings: Settings, model: str, prompt: str) -> str:
    llm = create_llm(
        model=model,
        base_url=settings.OLLAMA_HOST,
        timeout=settings.OLLAMA_TIMEOUT_SECONDS,
        use_cache=False,
    )
    config = GenerateConfig(
        temperature=settings.OLLAMA_TEMPERATURE,
        seed=settings.OLLAMA_SEED,
        response_format="json",
    )
    try:
        response = llm.generate(
            messages=[{"role": "user", "content": prompt}],
            config=config,
        )
    except LLMError as exc:
        raise UpstreamUnavailableError(str(exc)) from exc
    return response.text


async def compare_documents(
    doc1: str,
    doc2: str,
    settings: Settings,
    model: str | None = None,
) -> ComparisonResult:
    model = model or settings.OLLAMA_DEFAULT_MODEL
    root = settings.documents_root

    doc_a, doc_b = await asyncio.gather(
        asyncio.to_thread(read_document, root, doc1),
        asyncio.to_thread(read_document, root, doc2),
    )
    logger.info(
        "Comparing '%s' (%d chars) with '%s' (%d chars) using model %s",
        doc1, len(doc_a), doc2, len(doc_b), model,
    )

    prompt = build_strict_prompt(doc_a, doc_b)
    text = await asyncio.to_thread(_generate_text, settings, model, prompt)
    if not text or not text.strip():
        raise UpstreamResponseError("El modelo no devolvió respuesta válida")

    parsed = extract_json_object(text)
    return normalize_verdict(parsed)
