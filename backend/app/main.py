import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging import setup_logging
from app.middleware.cors import setup_cors
from app.modules.comparison.router import (
    ANALYSIS_ERROR_HINT,
    ANALYSIS_ERROR_MESSAGE,
    router as comparison_router,
)

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logger.info("Servidor listo en http://localhost:%d", settings.APP_PORT)
    logger.info("Documentos: %s | Ollama: %s", settings.documents_root, settings.OLLAMA_HOST)
    yield


app = FastAPI(title="Document Comparison API", lifespan=lifespan)

setup_cors(app)

app.include_router(comparison_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(_request: Request, exc: Exception):
    logger.error("Error completo: %s", exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": ANALYSIS_ERROR_MESSAGE,
            "detalle": str(exc),
            "solucion": ANALYSIS_ERROR_HINT,
        },
    )


@app.get("/")
async def status():
    return {
        "status": "running",
        "model": settings.OLLAMA_DEFAULT_MODEL,
        "ollama_host": settings.OLLAMA_HOST,
    }


def run() -> None:
    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
