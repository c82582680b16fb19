"""Domain layer — value objects and their validation rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
