"""
Record request/response schemas.
"""
from pydantic import BaseModel, Field


class RecordCreate(BaseModel):
    """Create record request. Absent fields are stored as empty strings."""
    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Password")


class UsernameUpdate(BaseModel):
    """Partial update request; only the username is changed."""
    username: str = Field(default="", description="New username")


class RecordView(BaseModel):
    """Outward projection of a record, without its identifier."""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class ResultMessage(BaseModel):
    """Human-readable result of a write operation."""
    result: str = Field(..., description="Result description")
