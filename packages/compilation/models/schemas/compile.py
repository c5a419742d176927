"""Schemas for the compile endpoint."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class CompileRequest(BaseModel):
    """JSON body accepted by the compile endpoint."""

    model_config = ConfigDict(extra="ignore")

    latex: StrictStr = Field(..., min_length=1, description="LaTeX document source")


class ErrorResponse(BaseModel):
    """Error envelope for 4xx responses."""

    error: str = Field(..., description="Error summary")


class InternalErrorResponse(ErrorResponse):
    """Error envelope for 500 responses, exposing diagnostics to trusted callers."""

    message: str = Field(..., description="Exception message")
    stack: str = Field(..., description="Formatted traceback")
