"""
Fonctions utilitaires partagees dans le projet Pointeuse.

Ce module centralise la manipulation des dates :
- utc_now : horloge par defaut des services
- to_utc_naive : normalisation des datetimes stockes (UTC sans tzinfo)
- parse_datetime : lecture d'une date ISO-8601 brute
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Retourne l'instant courant en UTC naif."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(value: datetime) -> datetime:
    """
    Normalise un datetime en UTC sans information de fuseau.

    Les datetimes naifs sont consideres comme deja exprimes en UTC.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_datetime(raw: str) -> datetime:
    """
    Parse une date ISO-8601 (ex: "2024-01-01T09:00", "2024-01-01T09:00:00Z").

    Raises:
        ValueError: Si la chaine n'est pas une date valide
    """
    if not raw or not raw.strip():
        raise ValueError("Date vide")
    return to_utc_naive(datetime.fromisoformat(raw.strip()))
