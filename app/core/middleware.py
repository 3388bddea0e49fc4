import time
from fastapi import Request
from app.core.config import settings_for
from app.core.logger import get_logger

logger = get_logger("request_logger")

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"


async def log_requests(request: Request, call_next):
    start_time = time.time()
    logger.info(f"Started request {request.method} {request.url.path}")
    response = await call_next(request)
    duration = time.time() - start_time
    logger.info(
        f"Completed request {request.method} {request.url.path} "
        f"with status={response.status_code} in {duration:.3f}s"
    )
    return response


async def apply_cors_headers(request: Request, call_next):
    """
    Attach the CORS policy to every response, errors included.

    Preflight requests are answered by the route itself (204, empty body),
    so Starlette's CORSMiddleware is not used here.
    """
    response = await call_next(request)
    origin = settings_for(request.app).CORS_ALLOW_ORIGIN.strip() or "*"
    response.headers["Access-Control-Allow-Origin"] = origin
    response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
    response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
    return response
