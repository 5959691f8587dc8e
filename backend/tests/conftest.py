from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.core.llm.base import BaseLLM
from app.core.llm.schemas import GenerateConfig, LLMResponse
from app.main import app


class FakeLLM(BaseLLM):
    """Records every prompt and answers with a canned text."""

    def __init__(self, text: str = ""):
        self.text = text
        self.calls: list[tuple[list[dict], GenerateConfig | None]] = []

    def generate(self, messages: list[dict], config: GenerateConfig | None = None) -> LLMResponse:
        self.calls.append((messages, config))
        return LLMResponse(text=self.text, usage={})


@pytest.fixture()
def documents_dir(tmp_path):
    root = tmp_path / "documents"
    root.mkdir()
    (root / "plantilla.txt").write_text("Contrato de arrendamiento. Renta: 1000 EUR.", encoding="utf-8")
    (root / "contrato.txt").write_text("Contrato de arrendamiento. Renta: 1200 EUR.", encoding="utf-8")
    return root


@pytest.fixture()
def test_settings(documents_dir):
    return Settings(
        DOCUMENTS_DIR=str(documents_dir),
        OLLAMA_HOST="http://ollama.test",
        OLLAMA_DEFAULT_MODEL="phi",
        OLLAMA_TIMEOUT_SECONDS=5.0,
    )


@pytest.fixture()
def fake_llm():
    llm = FakeLLM()
    with patch("app.modules.comparison.service.create_llm", return_value=llm) as factory:
        llm.factory = factory
        yield llm


@pytest.fixture()
def client(test_settings, fake_llm):
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
