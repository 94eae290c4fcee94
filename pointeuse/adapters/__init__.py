"""
Adaptateurs d'entree de Pointeuse (hors API web).
"""
