"""
Request and response schemas for API endpoints.
"""
from app.schemas.record import (
    RecordCreate,
    UsernameUpdate,
    RecordView,
    ResultMessage,
)

__all__ = [
    "RecordCreate",
    "UsernameUpdate",
    "RecordView",
    "ResultMessage",
]
