from fastapi import APIRouter, Depends, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, get_settings
from app.core.logger import get_logger
from app.core.middleware import ALLOWED_METHODS
from app.models.quote_request import QuoteRequest
from app.models.response import SendResult
from app.services.email_content import build_email_content
from app.services.mailjet_service import build_mailjet_payload, send_mailjet_message

quote_router = APIRouter(prefix="/api", tags=["Quote"])

logger = get_logger(__name__)

INVALID_EMAIL = "Adresse e-mail client invalide."
METHOD_NOT_ALLOWED = "Method not allowed"
MISSING_CONFIG = "Configuration Mailjet manquante (MJ_API_KEY, MJ_API_SECRET, MAIL_FROM_EMAIL)."
SERVER_ERROR = "Erreur serveur"


def result_response(status_code: int, result: SendResult, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(exclude_none=True),
        headers=headers,
    )


async def read_json_body(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """
    Answer every method the router does not serve (GET, HEAD, TRACE, ...)
    with the same JSON body and ``Allow`` header.
    """
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    logger.info(f"Rejected {request.method} {request.url.path}")
    return result_response(
        405,
        SendResult(ok=False, error=METHOD_NOT_ALLOWED),
        headers={"Allow": ALLOWED_METHODS},
    )


@quote_router.options("/send-quote", status_code=204)
async def send_quote_preflight():
    return Response(status_code=204)


@quote_router.post("/send-quote")
async def send_quote(request: Request, settings: Settings = Depends(get_settings)):
    try:
        body = await read_json_body(request)
        try:
            quote = QuoteRequest.model_validate(body)
        except ValidationError:
            logger.warning("Rejected quote submission: invalid client_email")
            return result_response(400, SendResult(ok=False, error=INVALID_EMAIL))

        if not settings.mailjet_configured:
            logger.error("Mailjet configuration is incomplete; refusing to send")
            return result_response(500, SendResult(ok=False, error=MISSING_CONFIG))

        content = build_email_content(quote)
        payload = build_mailjet_payload(settings, quote.client_email, content)

        logger.info(f"Forwarding {quote.action_type} summary for {quote.client_email} to Mailjet")
        result = await send_mailjet_message(payload, settings)
        if not result.ok:
            return result_response(502, result)

        return result_response(200, result)

    except Exception:
        logger.exception("send-quote error")
        return result_response(500, SendResult(ok=False, error=SERVER_ERROR))
