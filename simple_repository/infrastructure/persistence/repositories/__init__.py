"""Concrete SQLAlchemy repository implementation.

Exports the SqlRepository base class that application repositories subclass,
plus the model-resolution helper it relies on.
"""

from .base import SqlRepository
from .resolution import conventional_model_name, resolve_model

__all__ = [
    "SqlRepository",
    "conventional_model_name",
    "resolve_model",
]
