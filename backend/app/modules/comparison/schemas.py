from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class CompareSimpleRequest(BaseModel):
    # Both are optional here so the router can answer 400 with its own message.
    doc1: Optional[str] = None
    doc2: Optional[str] = None
    model: Optional[str] = None


class ComparisonResult(BaseModel):
    igual: Literal["SI", "NO"]
    razon: str
    diferencias: list[Any] = Field(default_factory=list)


class CompareSimpleResponse(BaseModel):
    success: bool = True
    comparacion: ComparisonResult


class ErrorResponse(BaseModel):
    error: str
    detalle: Optional[str] = None
    solucion: Optional[str] = None
