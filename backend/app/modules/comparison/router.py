import logging

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.modules.comparison.exceptions import ComparisonError
from app.modules.comparison.schemas import (
    CompareSimpleRequest,
    CompareSimpleResponse,
    ErrorResponse,
)
from app.modules.comparison.service import compare_documents

logger = logging.getLogger(__name__)

MISSING_DOCUMENTS_MESSAGE = "Se requieren ambos documentos"
ANALYSIS_ERROR_MESSAGE = "Error en el análisis"
ANALYSIS_ERROR_HINT = "1) Verifique los documentos 2) Pruebe con otro modelo 3) Revise logs"

router = APIRouter(tags=["Comparison"])


@router.post(
    "/compare-simple",
    response_model=CompareSimpleResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def compare_simple_endpoint(
    request: CompareSimpleRequest | None = Body(default=None),
    settings: Settings = Depends(get_settings),
):
    if request is None or not request.doc1 or not request.doc2:
        return JSONResponse(status_code=400, content={"error": MISSING_DOCUMENTS_MESSAGE})

    try:
        result = await compare_documents(
            request.doc1,
            request.doc2,
            settings=settings,
            model=request.model,
        )
    except ComparisonError as exc:
        logger.exception("Error completo comparando '%s' y '%s'", request.doc1, request.doc2)
        error = ErrorResponse(
            error=ANALYSIS_ERROR_MESSAGE,
            detalle=str(exc),
            solucion=ANALYSIS_ERROR_HINT,
        )
        return JSONResponse(status_code=500, content=error.model_dump())

    return CompareSimpleResponse(comparacion=result)
