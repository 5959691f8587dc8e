import pytest

from app.core.llm.providers.ollama import OllamaProvider
from app.core.llm.service import _instances, clear_llm_cache, create_llm


@pytest.fixture(autouse=True)
def _clean_cache():
    clear_llm_cache()
    yield
    clear_llm_cache()


def test_create_llm_defaults_to_ollama():
    llm = create_llm(model="phi", base_url="http://ollama.test")

    assert isinstance(llm, OllamaProvider)
    assert llm.model == "phi"


def test_create_llm_caches_per_model_and_host():
    first = create_llm(model="phi", base_url="http://ollama.test")

    assert create_llm(model="phi", base_url="http://ollama.test") is first
    assert create_llm(model="llama3", base_url="http://ollama.test") is not first
    assert create_llm(model="phi", base_url="http://otro.test") is not first


def test_create_llm_without_cache_stores_nothing():
    llm = create_llm(model="phi", base_url="http://ollama.test", use_cache=False)

    assert isinstance(llm, OllamaProvider)
    assert _instances == {}
    assert create_llm(model="phi", base_url="http://ollama.test") is not llm


def test_create_llm_cache_key_includes_timeout():
    short = create_llm(model="phi", base_url="http://ollama.test", timeout=5.0)
    long = create_llm(model="phi", base_url="http://ollama.test", timeout=300.0)

    assert long is not short
    assert long._timeout == 300.0
    assert create_llm(model="phi", base_url="http://ollama.test", timeout=5.0) is short


def test_create_llm_rejects_unknown_provider():
    with pytest.raises(ValueError, match="Unsupported LLM provider"):
        create_llm(provider="local", model="phi")
