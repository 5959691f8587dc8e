from pathlib import Path

from app.modules.comparison.exceptions import DocumentReadError


def resolve_document_path(root: Path, name: str) -> Path:
    """Resolve ``name`` inside ``root``; identifiers may not escape the root."""
    base = root.resolve()
    try:
        candidate = (base / name).resolve()
    except (OSError, ValueError) as exc:
        raise DocumentReadError(f"No se pudo leer el documento '{name}': {exc}") from exc
    if not candidate.is_relative_to(base):
        raise DocumentReadError(f"Documento fuera del directorio permitido: '{name}'")
    return candidate


def read_document(root: Path, name: str) -> str:
    path = resolve_document_path(root, name)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise DocumentReadError(f"No se pudo leer el documento '{name}': {exc}") from exc
