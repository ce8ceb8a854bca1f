"""Domain layer: duration grammar, units, number words, start values.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
