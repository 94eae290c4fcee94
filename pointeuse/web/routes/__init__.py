"""
Routes HTTP de l'API Pointeuse.
"""
