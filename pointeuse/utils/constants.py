"""
Constantes globales pour Pointeuse.

Valeurs par defaut de la pagination, de la tolerance sur l'heure de debut
et de la precision des soldes. Les valeurs effectives sont surchargeables
via Settings.
"""

# Pagination de la recherche de worklogs
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Tolerance (minutes) accordee a une heure de debut dans le futur
DEFAULT_START_SKEW_MINUTES = 5

# Nombre de decimales des soldes en heures
HOURS_PRECISION = 2
