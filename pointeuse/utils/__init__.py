"""
Utilitaires et constantes pour Pointeuse.
"""

from pointeuse.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_START_SKEW_MINUTES,
    HOURS_PRECISION,
    MAX_PAGE_SIZE,
)

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_START_SKEW_MINUTES",
    "HOURS_PRECISION",
    "MAX_PAGE_SIZE",
]
