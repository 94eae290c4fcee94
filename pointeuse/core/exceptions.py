"""
Erreurs typées du domaine.

Les services levent uniquement ces erreurs pour les cas attendus. La couche
web se charge de les traduire en reponses HTTP (400, 404, 409).
"""


class PointeuseError(Exception):
    """Erreur de base de l'application."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PointeuseError):
    """Donnees incoherentes (ordre des dates, pagination invalide, ...)."""


class NotFoundError(PointeuseError):
    """Ressource absente ou n'appartenant pas a l'utilisateur appelant."""


class ConflictError(PointeuseError):
    """Violation d'une regle metier (ex: deuxieme worklog ouvert)."""
