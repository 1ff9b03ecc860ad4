"""Rutas de la API."""

from . import recipe_imports

__all__ = ["recipe_imports"]
