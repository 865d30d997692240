import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an x-operation-id and logs its outcome."""

    async def dispatch(self, request: Request, call_next):
        operation_id = request.headers.get("x-operation-id") or str(uuid.uuid4())
        request.state.operation_id = operation_id
        started = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["x-operation-id"] = operation_id
        logger.info(
            "%s %s -> %d (%.1f ms) op=%s",
            request.method, request.url.path, response.status_code, elapsed_ms, operation_id,
        )
        return response
