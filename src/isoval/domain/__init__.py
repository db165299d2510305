"""Domain layer: constraint primitives, records, and the validation walk.

This layer depends only on stdlib and pydantic.
It must never import from schemas, services, infrastructure, commands, or config.
"""
