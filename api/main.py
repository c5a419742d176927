from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.core.config import settings
from common.core.constants import API_V1_PREFIX, Environment, OBJECT_KEY_HEADER
from common.core.exception_handlers import (
    app_exception_handler,
    unhandled_exception_handler,
)
from common.core.exceptions import AppException
from api.v1.routes.router import api_router
from internal.routes.router import internal_router
from packages.compilation.routes.compile import (
    compile_method_not_allowed,
    root_router as compile_root_router,
)
from common.providers.rate_limiter.limiter import limiter

# Initialize Axiom OpenTelemetry exporter (must be first)
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from common.core.otel_axiom_exporter import (
    _initialize_telemetry,
    get_logger,
)  # noqa


_initialize_telemetry()

# Get logger
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(
        f"Starting application (sandbox={settings.sandbox_provider.value}, "
        f"pool={settings.sandbox_pool_key})"
    )
    if not settings.api_key:
        logger.warning("API_KEY is not configured; every compile request will be rejected")
    yield
    # Shutdown; sandboxes stay warm, nothing to tear down
    logger.info("Shutting down application...")


# Only expose OpenAPI docs in local development
docs_url = "/docs" if settings.environment == Environment.LOCAL else None
redoc_url = "/redoc" if settings.environment == Environment.LOCAL else None
openapi_url = "/openapi.json" if settings.environment == Environment.LOCAL else None

app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    lifespan=lifespan,
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url=openapi_url,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(StarletteHTTPException, compile_method_not_allowed)
app.add_exception_handler(Exception, unhandled_exception_handler)
app.add_middleware(SlowAPIMiddleware)


# Instrument FastAPI with OpenTelemetry
FastAPIInstrumentor.instrument_app(app)

# Add gzip compression middleware
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[OBJECT_KEY_HEADER],
)

# Root-level probes (not under /api/v1)
app.include_router(internal_router)

app.include_router(api_router, prefix=API_V1_PREFIX)

# Bare POST to the service root compiles too
app.include_router(compile_root_router)
