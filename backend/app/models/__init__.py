"""
Pydantic models for database documents.
"""
from app.models.record import Record

__all__ = ["Record"]
