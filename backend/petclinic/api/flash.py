"""Module: flash.

One-time messages attached to a redirect. The redirect response carries a
signed cookie; the next rendered view reads it and clears it.
"""

import json
import logging

from fastapi import Request, Response

from petclinic.core.config import settings
from petclinic.core.security import sign_value, unsign_value

logger = logging.getLogger(__name__)


def push_flash(response: Response, **messages: str) -> None:
    payload = {key: value for key, value in messages.items() if value}
    if not payload:
        return
    response.set_cookie(
        settings.flash_cookie_name,
        sign_value(json.dumps(payload)),
        httponly=True,
        samesite="lax",
    )


def read_flash(request: Request) -> dict[str, str]:
    token = request.cookies.get(settings.flash_cookie_name)
    if not token:
        return {}
    raw = unsign_value(token)
    if raw is None:
        logger.warning("Discarding flash cookie with an invalid signature")
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return {str(key): str(value) for key, value in data.items()} if isinstance(data, dict) else {}


def clear_flash(request: Request, response: Response) -> None:
    if settings.flash_cookie_name in request.cookies:
        response.delete_cookie(settings.flash_cookie_name, httponly=True, samesite="lax")
