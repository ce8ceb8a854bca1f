"""Service layer: the duration engine and ServiceResult-returning services.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
