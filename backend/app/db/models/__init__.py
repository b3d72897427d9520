"""Database models package."""
from app.db.models.product import Produto

__all__ = ["Produto"]
