"""Legacy image table (source store)"""

from sqlmodel import Field
from .base import BaseModel


class LegacyImage(BaseModel, table=True):
    """
    Image metadata as stored by the old image host.

    The binary content is not stored here. It is served by the host at
    ``{base_url}/{path}/{name}``.

    This table is owned by the source store and is only ever read. Rows
    are paged by ``id``.
    """

    __tablename__ = "original_image"

    path: str = Field(
        max_length=512,
        description="Relative directory on the image host, e.g. 2024/09/24"
    )
    name: str = Field(
        max_length=255,
        description="Stored file name, e.g. 66f2cbaf9c143.png"
    )
    origin_name: str = Field(
        max_length=255,
        description="File name supplied by the user at upload time"
    )
