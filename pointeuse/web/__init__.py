"""
Interface web (API JSON) de Pointeuse, basée sur FastAPI.
"""
