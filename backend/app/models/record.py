"""
Record model for the sample database.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """
    Record document model for MongoDB sample.dataset collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(default="", description="Username, not unique")
    password: str = Field(default="", description="Password, stored as given")
