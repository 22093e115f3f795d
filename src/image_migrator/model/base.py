"""Base data model class"""
from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class BaseModel(SQLModel):
    """Base class for both image tables with common fields

    Timestamps are naive columns so legacy values round-trip unchanged.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=datetime.now,
        nullable=False,
        sa_type=DateTime(timezone=False),
    )
    updated_at: datetime = Field(
        default_factory=datetime.now,
        nullable=False,
        sa_type=DateTime(timezone=False),
    )
