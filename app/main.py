from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.routes.quote_router import method_not_allowed_handler, quote_router
from contextlib import asynccontextmanager
from app.core.config import settings, settings_for
from app.core.logger import get_logger
from app.core.middleware import apply_cors_headers, log_requests

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):

    if not settings_for(app).mailjet_configured:
        logger.warning(" Mailjet is not configured (MJ_API_KEY, MJ_API_SECRET, MAIL_FROM_EMAIL); sends will fail")
    logger.info(" Application startup complete")

    yield


    logger.info(" Application shutdown initiated")

app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.middleware("http")(apply_cors_headers)
app.middleware("http")(log_requests)
app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
app.include_router(quote_router)
