"""API routes."""
from api.routes import editor

__all__ = ["editor"]
