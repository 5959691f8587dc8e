from pathlib import Path

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[3]
ENV_FILE = ROOT_DIR / ".env"
load_dotenv(dotenv_path=ENV_FILE)


class Settings(BaseSettings):
    # HTTP server
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 3000
    CORS_ORIGINS: str = ""
    LOG_LEVEL: str = "INFO"

    # Documents
    DOCUMENTS_DIR: str = str(ROOT_DIR / "documents")

    # Upstream inference server (Ollama)
    OLLAMA_HOST: str = "http://localhost:11434"
    OLLAMA_DEFAULT_MODEL: str = "phi"
    OLLAMA_TIMEOUT_SECONDS: float = 120.0
    OLLAMA_TEMPERATURE: float = 0.0
    OLLAMA_SEED: int = 123

    @property
    def documents_root(self) -> Path:
        path = Path(self.DOCUMENTS_DIR).expanduser()
        if not path.is_absolute():
            path = ROOT_DIR / path
        return path.resolve()

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = str(ENV_FILE)
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    return settings
