"""FastAPI routers acting as controllers in the MVC architecture."""

from . import analysis, challenge

__all__ = ["analysis", "challenge"]
