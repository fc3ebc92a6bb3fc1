import uuid
import time
from contextvars import ContextVar
from typing import Optional
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from config import logger

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request_id_var.set(request_id)

        start_time = time.time()

        logger.info(
            "Request %s started: %s %s", request_id, request.method, request.url.path
        )

        response = await call_next(request)

        duration = time.time() - start_time

        logger.info(
            "Request %s completed with %s in %.2f ms",
            request_id, response.status_code, duration * 1000
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        return response

def get_request_id() -> Optional[str]:
    return request_id_var.get()
