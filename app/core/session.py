"""Cookie transport for the session token."""

from typing import Optional

from fastapi import Request, Response

from app.core.config import settings
from app.core.security import TOKEN_EXPIRE_MIN

COOKIE_NAME = "token"
# même durée que le token
COOKIE_MAX_AGE = TOKEN_EXPIRE_MIN * 60


def attach_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        max_age=COOKIE_MAX_AGE,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    # max-age=0 + expires passé : le navigateur supprime le cookie
    response.delete_cookie(
        COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )


def extract_session_token(request: Request) -> Optional[str]:
    """Renvoie le token du cookie, None pour une requête anonyme"""
    token = request.cookies.get(COOKIE_NAME)
    return token or None
