"""Domain layer: edge records and their canonical rendering.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
