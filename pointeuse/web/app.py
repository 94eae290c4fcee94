"""
Application FastAPI de Pointeuse.

Initialise l'application web avec le Container DI, enregistre les
gestionnaires d'erreurs (enveloppe JSON commune) et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..container import Container
from ..core.exceptions import PointeuseError
from .responses import domain_error_response, failure_response
from .routes.balance import router as balance_router
from .routes.worklogs import router as worklogs_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI a utiliser (un nouveau par defaut). Les tests
            fournissent un container dont la configuration est surchargee.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Cree les tables au démarrage et libère l'engine à l'arrêt."""
        app.state.container.database.init()
        yield
        app.state.container.engine().dispose()

    app = FastAPI(title="Pointeuse", lifespan=lifespan)
    app.state.container = container or Container()

    @app.middleware("http")
    async def bind_user(request: Request, call_next):
        """Attache l'utilisateur de la requête aux logs."""
        header = app.state.container.config().user_header
        with logger.contextualize(user_id=request.headers.get(header, "-")):
            return await call_next(request)

    @app.exception_handler(PointeuseError)
    async def handle_domain_error(request: Request, exc: PointeuseError):
        return domain_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in errors
        )
        return failure_response(400, "ValidationError", message or "Requête invalide")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return failure_response(exc.status_code, "HTTPError", str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Erreur inattendue sur {request.method} {request.url.path}")
        return failure_response(500, "InternalError", "Erreur interne du serveur")

    app.include_router(worklogs_router)
    app.include_router(balance_router)
    return app


app = create_app()
