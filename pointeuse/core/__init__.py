"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et erreurs typées. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Worklog, BalanceSnapshot, Balance)
- ports/ : Interfaces abstraites définissant les contrats de persistance
- value_objects/ : Objets valeur immutables (requêtes, pagination)
"""
