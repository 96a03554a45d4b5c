"""
Database definitions and collection constants.
"""
from app.database.databases import sample_db

__all__ = ["sample_db"]
