"""Domain layer — rental models, tax brackets, errors, and ports.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
