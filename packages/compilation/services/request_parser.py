"""Parsing of compile request bodies into a tagged result."""

import json
from enum import StrEnum
from typing import Union

from pydantic import BaseModel, ValidationError

from packages.compilation.models.schemas.compile import CompileRequest

INVALID_JSON_MESSAGE = "Invalid JSON body."
INVALID_LATEX_MESSAGE = 'Missing or invalid "latex" field in JSON body'


class InvalidRequestKind(StrEnum):
    PARSE = "parse"
    VALIDATION = "validation"


class ValidCompileRequest(BaseModel):
    latex: str


class InvalidCompileRequest(BaseModel):
    kind: InvalidRequestKind
    reason: str


CompileRequestParseResult = Union[ValidCompileRequest, InvalidCompileRequest]


def parse_compile_request(body: bytes) -> CompileRequestParseResult:
    """Parse a raw request body.

    Returns ``InvalidCompileRequest(kind=PARSE)`` when the body is not JSON
    and ``InvalidCompileRequest(kind=VALIDATION)`` when it is JSON without a
    non-empty string ``latex`` field.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return InvalidCompileRequest(
            kind=InvalidRequestKind.PARSE, reason=INVALID_JSON_MESSAGE
        )

    if not isinstance(payload, dict):
        return InvalidCompileRequest(
            kind=InvalidRequestKind.VALIDATION, reason=INVALID_LATEX_MESSAGE
        )

    try:
        request = CompileRequest.model_validate(payload)
    except ValidationError:
        return InvalidCompileRequest(
            kind=InvalidRequestKind.VALIDATION, reason=INVALID_LATEX_MESSAGE
        )

    return ValidCompileRequest(latex=request.latex)
