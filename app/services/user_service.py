"""User service: registration, login and lookup of the current user."""

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.errors import Conflict, InvalidCredentials, UserNotFound
from app.models.user import User

logger = logging.getLogger(__name__)


def register_user(db: Session, email: str, password: str, name: str) -> User:
    # Vérifie si l'email existe déjà
    if db.query(User).filter(User.email == email).first():
        raise Conflict()

    user = User(email=email, name=name)
    user.set_password(password)

    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # inscription concurrente avec le même email
        db.rollback()
        raise Conflict() from exc
    db.refresh(user)

    logger.info("User %s registered", user.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if not user or not user.verify_password(password):
        logger.info("Failed login for %s", email)
        raise InvalidCredentials()
    return user


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise UserNotFound()
    return user
