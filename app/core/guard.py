"""Per-request authentication guard.

Three terminal outcomes:
  - no token in the cookie      -> NotAuthenticated (401 "Not authenticated")
  - token rejected by the codec -> InvalidSession   (401 "Invalid token")
  - token verified              -> Principal(user_id)

Expired and tampered tokens are reported with the same message.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from app.core.errors import InvalidSession, NotAuthenticated, TokenError
from app.core.security import TokenCodec, token_codec
from app.core.session import extract_session_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    user_id: int


def authenticate(token: Optional[str], codec: TokenCodec = token_codec) -> Principal:
    if not token:
        raise NotAuthenticated()

    try:
        claims = codec.verify(token)
    except TokenError as exc:
        logger.info("Session rejected: %s", exc)
        raise InvalidSession() from exc

    return Principal(user_id=claims["user_id"])


def get_current_principal(request: Request) -> Principal:
    # Dépendance FastAPI : lecture seule de la requête
    return authenticate(extract_session_token(request))
