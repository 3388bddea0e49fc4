from typing import Optional

import httpx

from app.core.config import Settings, settings as app_settings
from app.core.logger import get_logger
from app.models.response import EmailContent, SendResult

logger = get_logger("mailjet_service", level=app_settings.MAILJET_LOG_LEVEL)

DEFAULT_ERROR = "Échec Mailjet"


def build_mailjet_payload(settings: Settings, client_email: str, content: EmailContent) -> dict:
    message = {
        "From": {"Email": settings.MAIL_FROM_EMAIL, "Name": settings.MAIL_FROM_NAME},
        "To": [{"Email": client_email}],
        "Cc": [{"Email": settings.RECIPIENT_EMAIL}] if settings.RECIPIENT_EMAIL else [],
        "Subject": content.subject,
        "TextPart": content.text,
        "HTMLPart": content.html,
    }
    if settings.REPLY_TO:
        message["ReplyTo"] = {"Email": settings.REPLY_TO}
    return {"Messages": [message]}


def _first_message(data) -> dict:
    if not isinstance(data, dict):
        return {}
    messages = data.get("Messages")
    if not isinstance(messages, list) or not messages or not isinstance(messages[0], dict):
        return {}
    return messages[0]


def _first_error_message(message: dict) -> Optional[str]:
    errors = message.get("Errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return errors[0].get("ErrorMessage")
    return None


async def _post_send(client: httpx.AsyncClient, payload: dict, settings: Settings) -> SendResult:
    try:
        resp = await client.post(
            settings.MAILJET_SEND_URL,
            auth=(settings.MJ_API_KEY, settings.MJ_API_SECRET),
            json=payload,
            timeout=settings.MAILJET_TIMEOUT_SEC,
        )
    except httpx.HTTPError as e:
        logger.error(f"Mailjet transport error: {e!r}")
        return SendResult(ok=False, error=str(e) or DEFAULT_ERROR)

    try:
        data = resp.json()
    except ValueError:
        data = None

    message = _first_message(data)
    status = message.get("Status")
    if not resp.is_success or status != "success":
        logger.error(f"Mailjet rejected send: http={resp.status_code} status={status} body={resp.text}")
        return SendResult(ok=False, error=_first_error_message(message) or DEFAULT_ERROR, detail=data)

    logger.info(f"Mailjet accepted message (http={resp.status_code})")
    return SendResult(ok=True)


async def send_mailjet_message(
    payload: dict, settings: Settings, client: Optional[httpx.AsyncClient] = None
) -> SendResult:
    """
    Make a single POST to the Mailjet v3.1 send endpoint.

    The send counts as successful only when the HTTP status is 2xx and the
    first message reports ``Status == "success"``. No retry is attempted.
    """
    recipients = [to["Email"] for to in payload["Messages"][0]["To"]]
    logger.info(f"Sending Mailjet message to {recipients}")
    logger.debug(f"Mailjet payload: {payload}")

    if client is not None:
        return await _post_send(client, payload, settings)
    async with httpx.AsyncClient() as session:
        return await _post_send(session, payload, settings)
