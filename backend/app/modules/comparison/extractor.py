import json
import logging
from typing import Any

from app.modules.comparison.exceptions import ResponseParseError

logger = logging.getLogger(__name__)


def find_json_span(text: str) -> str | None:
    """Return the text between the first ``{`` and the last ``}``, inclusive."""
    start = text.find("{")
    end = text.rfind("}")
    if start < 0 or end < start:
        return None
    return text[start : end + 1]


def extract_json_object(text: str) -> dict[str, Any]:
    """Parse the JSON object embedded in free model output.

    Prose before the first brace and after the last brace is dropped; anything
    in between is handed to the JSON parser untouched.
    """
    try:
        candidate = find_json_span(text or "")
        if candidate is None:
            raise ValueError("No se encontró JSON en la respuesta")
        return json.loads(candidate)
    except ValueError as exc:
        logger.error("Respuesta cruda recibida: %s", text)
        raise ResponseParseError(f"Error parseando JSON: {exc}") from exc
