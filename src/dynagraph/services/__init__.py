"""Service layer: table lifecycle and edge operations.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
