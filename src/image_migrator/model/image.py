"""Migrated image table (destination store)"""

from sqlalchemy import Column, LargeBinary
from sqlmodel import Field
from .base import BaseModel


class Image(BaseModel, table=True):
    """
    Image with its binary content embedded.

    ``created_at`` and ``updated_at`` hold the legacy record's timestamps,
    not the time of migration.

    ``image_identifier`` is the stored file name without its extension.
    It is not unique: running the migration twice inserts the same image
    twice.
    """

    __tablename__ = "image"

    image_identifier: str = Field(
        index=True,
        max_length=255,
        description="Stored file name without extension"
    )
    original_file_name: str = Field(
        max_length=255,
        description="File name supplied by the user at upload time"
    )
    image_type: str = Field(
        max_length=32,
        description="File extension without the leading dot, may be empty"
    )
    image_file_data: bytes = Field(
        sa_column=Column(LargeBinary, nullable=False),
        description="Raw image bytes as downloaded"
    )
