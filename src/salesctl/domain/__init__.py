"""Domain layer: transfer shapes, mapping, sorting, and messages.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
