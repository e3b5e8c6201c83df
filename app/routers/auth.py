from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.guard import Principal, get_current_principal
from app.core.security import create_access_token
from app.core.session import attach_session_cookie, clear_session_cookie
from app.schemas.user import (
    UserCreate,
    UserResponse,
    LoginRequest,
    LoginResponse,
    CurrentUser,
    MessageResponse,
)
from app.services.user_service import register_user, authenticate_user, get_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Créer un nouvel utilisateur"""
    return register_user(db, user_data.email, user_data.password, user_data.name)


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """Se connecter : le token de session est posé dans le cookie"""
    user = authenticate_user(db, credentials.email, credentials.password)

    token = create_access_token(user.id)
    attach_session_cookie(response, token)

    return {"user": UserResponse.model_validate(user)}


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """Supprime le cookie de session.

    Le token lui-même n'est pas révoqué : une copie reste valide jusqu'à son
    expiration.
    """
    clear_session_cookie(response)
    return {"message": "Logged out successfully"}


@router.get("/user", response_model=CurrentUser)
def current_user(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    return get_user(db, principal.user_id)
