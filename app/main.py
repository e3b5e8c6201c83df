import logging
from os import getenv
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.database import engine, Base
from app.core.errors import AppError
from app.routers import health, auth, tasks

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("app")

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Task Manager API",
    version="1.0.0"
)


@app.exception_handler(AppError)
def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": "Internal server error"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
def validation_error_handler(request: Request, exc: RequestValidationError):
    # 400 plutôt que 422, comme pour les autres erreurs de saisie
    # "input" retiré : il peut contenir le mot de passe envoyé
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid input", "errors": jsonable_encoder(errors)},
    )


@app.exception_handler(Exception)
def internal_error_handler(request: Request, exc: Exception):
    # Pas de trace ni de message interne côté client
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(auth.router)
app.include_router(tasks.router)


def run():
    """Lance l'API avec uvicorn (commande `task-manager-api`)"""
    uvicorn.run("app.main:app", host=getenv("HOST", "0.0.0.0"), port=int(getenv("PORT", "8000")))
