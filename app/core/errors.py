"""Application errors.

Every error carries the HTTP status and the message the client is allowed to
see. Handlers in app.main turn them into JSON responses.
"""

from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"

    def __init__(self, detail: str = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid input"


class Conflict(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "User already exists"


class NotAuthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Not authenticated"


class InvalidSession(AppError):
    # Même message pour un token expiré ou falsifié
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid token"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid email or password"


class UserNotFound(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "User not found"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Task not found"


class InternalError(AppError):
    pass


class TokenError(Exception):
    """Rejet d'un token par le codec (jamais renvoyé tel quel au client)"""


class InvalidToken(TokenError):
    pass


class ExpiredToken(TokenError):
    pass
