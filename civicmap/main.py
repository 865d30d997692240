import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from civicmap.core.errors import register_error_handlers
from civicmap.core.settings import get_settings
from civicmap.db.init_db import init_db
from civicmap.middleware.request_context import RequestContextMiddleware
from civicmap.routers import catalog, health, locations, photos, stats

# OpenTelemetry (optional)
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("civicmap")

app = FastAPI(title="Civic Map API")
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)

# Create tables on import
init_db()


# OTEL instrumentation when enabled
if settings.ENABLE_OTEL:
    resource = Resource(attributes={"service.name": settings.OTEL_SERVICE_NAME})
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT, insecure=True)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    FastAPIInstrumentor.instrument_app(app)
    logger.info("OpenTelemetry enabled -> %s", settings.OTEL_EXPORTER_OTLP_ENDPOINT)
else:
    logger.info("OpenTelemetry disabled")

# Routers
app.include_router(locations.router)
app.include_router(photos.router)
app.include_router(stats.router)
app.include_router(catalog.router)
app.include_router(health.router)

# Photo files are served as /uploads/locationPhotos/<id>/<file>
settings.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=str(settings.UPLOADS_DIR)), name="uploads")

# Trace id on every response (when OTEL is active)
from opentelemetry.trace import get_current_span
from starlette.responses import Response
from starlette.requests import Request

@app.middleware("http")
async def add_trace_headers(request: Request, call_next):
    response: Response = await call_next(request)
    span = get_current_span()
    if span and span.get_span_context().trace_id:
        trace_id = format(span.get_span_context().trace_id, '032x')
        response.headers["x-trace-id"] = trace_id
    return response


def run() -> None:
    import uvicorn

    uvicorn.run("civicmap.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
