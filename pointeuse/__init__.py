"""
Pointeuse - Suivi du temps de travail et solde d'heures.

Ce package fournit les fonctionnalites pour demarrer, terminer et corriger
des sessions de travail (worklogs) et consulter le solde d'heures derive.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (cas d'utilisation)
- infrastructure/ : Persistance SQLModel
- web/, adapters/cli/ : Interfaces HTTP et ligne de commande
"""
