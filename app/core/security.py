import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import settings
from app.core.errors import ExpiredToken, InternalError, InvalidToken

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
# bcrypt refuse les mots de passe au-delà de 72 octets
MAX_PASSWORD_BYTES = 72
ALGORITHM = "HS256"
TOKEN_EXPIRE_MIN = 60


def password_too_long(password: str) -> bool:
    return len(password.encode()) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    # Le sel est généré à chaque appel et stocké dans le hash
    try:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode()
    except (TypeError, ValueError) as exc:
        logger.error("Error hashing password: %s", exc)
        raise InternalError("Unable to hash password") from exc


def verify_password(password: str, password_hash: str) -> bool:
    # Un mot de passe trop long n'a jamais pu être enregistré
    if password_too_long(password):
        return False
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (TypeError, ValueError) as exc:
        # hash stocké illisible
        logger.error("Error comparing password: %s", exc)
        raise InternalError("Unable to compare passwords") from exc


class TokenCodec:
    """Signs and verifies the session JWT.

    The token only carries the user id and its validity window; nothing is
    stored server side, so a token stays valid until ``exp`` even after logout.
    """

    def __init__(self, secret: str, expire_minutes: int = 60):
        if not secret:
            raise ValueError("secret must not be empty")
        self._secret = secret
        self.expire_minutes = expire_minutes

    def issue(self, user_id: int, now: datetime = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "user_id": user_id,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> dict:
        # jose vérifie la signature et exp dans le même appel
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError as exc:
            raise ExpiredToken("Token expired") from exc
        except JWTError as exc:
            raise InvalidToken("Invalid token") from exc

        user_id = payload.get("user_id")
        if user_id is None:
            raise InvalidToken("Missing user_id claim")
        return {"user_id": user_id}


token_codec = TokenCodec(settings.JWT_SECRET, TOKEN_EXPIRE_MIN)


def create_access_token(user_id: int) -> str:
    return token_codec.issue(user_id)
