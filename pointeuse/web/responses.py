"""
Enveloppe des reponses JSON de l'API.

Succes : {"success": true, "data": ...}
Echec  : {"success": false, "error": {"type": ..., "message": ...}}

Les erreurs du domaine sont traduites en statut HTTP ; toute autre exception
produit un 500 generique sans detail interne.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    ConflictError,
    NotFoundError,
    PointeuseError,
    ValidationError,
)

_STATUS_BY_ERROR: dict[type[PointeuseError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
}


def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    """Construit une reponse de succes."""
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data, by_alias=True)},
    )


def failure_response(status_code: int, error_type: str, message: str) -> JSONResponse:
    """Construit une reponse d'echec."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {"type": error_type, "message": message},
        },
    )


def domain_error_response(error: PointeuseError) -> JSONResponse:
    """Traduit une erreur du domaine en reponse HTTP."""
    for error_class, status_code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_class):
            return failure_response(status_code, error_class.__name__, error.message)
    return failure_response(500, "InternalError", "Erreur interne du serveur")
