"""Domain layer — rules, errors, and the character record.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
