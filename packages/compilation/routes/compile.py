from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.core.config import settings
from common.core.constants import API_V1_PREFIX, OBJECT_KEY_HEADER
from common.core.exception_handlers import app_exception_handler, internal_error_response
from common.core.exceptions import (
    BadRequestError,
    CompilationFailedError,
    MethodNotAllowedError,
)
from common.core.otel_axiom_exporter import trace_span, get_logger
from common.providers.sandbox.factory import get_sandbox
from common.providers.storage.factory import get_storage
from packages.auth.dependencies import require_api_key
from packages.compilation.models.schemas.compile import (
    ErrorResponse,
    InternalErrorResponse,
)
from packages.compilation.services.latex_compile_service import LatexCompileService
from packages.compilation.services.request_parser import (
    InvalidCompileRequest,
    parse_compile_request,
)

logger = get_logger(__name__)

METHOD_NOT_ALLOWED_MESSAGE = (
    "Please send a POST request with your LaTeX code in a JSON body."
)
COMPILE_PATH = "/compile"
COMPILE_PATHS = frozenset({"/", f"{API_V1_PREFIX}{COMPILE_PATH}"})


def get_latex_compile_service() -> LatexCompileService:
    """Build the pipeline around the shared sandbox for this deployment."""
    return LatexCompileService(
        sandbox=get_sandbox(settings.sandbox_pool_key),
        storage=get_storage(),
        logger=get_logger("packages.compilation.pipeline"),
    )


@trace_span
async def compile_latex(
    request: Request,
    service: LatexCompileService = Depends(get_latex_compile_service),
):
    """
    Compile a LaTeX document to PDF and publish it to object storage.

    Expects a JSON body ``{"latex": "..."}``. Returns the PDF bytes with the
    storage key in the ``X-R2-Object-Key`` header, or the compiler
    diagnostics as plain text when compilation fails.
    """
    parsed = parse_compile_request(await request.body())
    if isinstance(parsed, InvalidCompileRequest):
        logger.warning(f"Rejected compile request ({parsed.kind}): {parsed.reason}")
        raise BadRequestError(parsed.reason)

    try:
        outcome = await service.compile_and_publish(parsed.latex)
    except BadRequestError:
        raise
    except Exception as e:
        logger.error(f"Request error: {e}", exc_info=True)
        return internal_error_response(e)

    if not outcome.succeeded:
        raise CompilationFailedError(outcome.result.diagnostic())

    artifact = outcome.artifact
    logger.info(f"Job {outcome.job_id} published {artifact.object_key}")
    return Response(
        content=artifact.content,
        media_type=artifact.content_type,
        headers={
            "Content-Disposition": f'attachment; filename="{artifact.filename}"',
            OBJECT_KEY_HEADER: artifact.object_key,
        },
    )


async def compile_method_not_allowed(request: Request, exc: StarletteHTTPException):
    """Answer any non-POST method on the compile paths with the plain-text 405.

    Routing rejects the method before dependencies run, so this precedes the
    API key check. Other HTTP errors keep the default rendering.
    """
    if exc.status_code == 405 and request.url.path in COMPILE_PATHS:
        return await app_exception_handler(
            request, MethodNotAllowedError(METHOD_NOT_ALLOWED_MESSAGE)
        )
    return await http_exception_handler(request, exc)


def _register_compile_routes(router: APIRouter, path: str) -> None:
    router.add_api_route(
        path,
        compile_latex,
        methods=["POST"],
        dependencies=[Depends(require_api_key)],
        response_class=Response,
        responses={
            200: {"content": {"application/pdf": {}}},
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            500: {"model": InternalErrorResponse},
        },
    )


# Mounted under /api/v1
router = APIRouter()
_register_compile_routes(router, COMPILE_PATH)

# Mounted at the service root
root_router = APIRouter()
_register_compile_routes(root_router, "/")
