"""
API Routers module.
"""
from app.routers import health, records

__all__ = ["health", "records"]
