"""
API module - routes and schemas.
Routes: layout (full layout, positions, sizes, subtree height, config).
"""

from .routes import register_routes

__all__ = ["register_routes"]
