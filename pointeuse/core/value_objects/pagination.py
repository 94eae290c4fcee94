"""
Objet valeur pour les resultats pagines.
"""

from dataclasses import dataclass, field

from pointeuse.core.entities.worklog import Worklog


@dataclass(frozen=True)
class WorklogPage:
    """
    Une page de worklogs avec les informations de pagination.

    Attributs:
        items: Worklogs de la page courante
        total: Nombre total de worklogs correspondant aux filtres
        page: Numero de la page (commence a 1)
        limit: Taille maximale d'une page
    """

    items: list[Worklog] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20

    @property
    def total_pages(self) -> int:
        """Nombre de pages disponibles."""
        if self.total == 0:
            return 0
        return (self.total + self.limit - 1) // self.limit

    @property
    def has_more(self) -> bool:
        """Vrai s'il existe une page suivante."""
        return self.page < self.total_pages
