"""
Service layer for business logic.
"""
from app.services.record_service import RecordService

__all__ = [
    "RecordService",
]
