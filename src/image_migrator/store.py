"""
Legacy and destination image stores

The migrator only sees the two protocols below: a read-only paged
source and a write-only single-row destination. The SQL
implementations use one short-lived SQLModel session per call.
"""
from dataclasses import dataclass, field
from typing import Optional, Protocol

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from .exception import InsertError, PageReadError
from .logging import get_logger
from .model import Image, LegacyImage

logger = get_logger(__name__)


def _describe(error: SQLAlchemyError) -> str:
    """Driver error text without the bound statement parameters"""
    return str(getattr(error, "orig", None) or error)


@dataclass
class Page:
    """One page of legacy records

    Attributes:
        records: Up to page_size records in ascending id order
        has_more: Whether rows exist after the last record
    """
    records: list[LegacyImage] = field(default_factory=list)
    has_more: bool = False

    @property
    def next_cursor(self) -> Optional[int]:
        """Cursor for the following page (id of the last record)"""
        if not self.records:
            return None
        return self.records[-1].id


class LegacyImageSource(Protocol):
    def next_page(self, after: Optional[int], page_size: int) -> Page:
        """Return the page following ``after``

        Raises:
            PageReadError: If the read fails
        """
        ...


class ImageDestination(Protocol):
    def insert(self, record: Image) -> None:
        """Persist one record

        Raises:
            InsertError: If the write fails
        """
        ...


class SqlLegacyImageSource:
    """Keyset-paginated reader over the legacy image table

    Pages are ordered by primary key and continue after the last seen id,
    so rows are never skipped or revisited within a run.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def next_page(self, after: Optional[int], page_size: int) -> Page:
        # One extra row tells whether another page follows
        statement = (
            select(LegacyImage)
            .order_by(LegacyImage.id)
            .limit(page_size + 1)
        )
        if after is not None:
            statement = statement.where(LegacyImage.id > after)

        try:
            with Session(self.engine) as session:
                rows = list(session.exec(statement).all())
        except SQLAlchemyError as e:
            raise PageReadError(
                f"failed to read legacy images after id {after}: {_describe(e)}"
            ) from e

        logger.debug(f"Read {len(rows)} legacy rows after id {after}")
        return Page(records=rows[:page_size], has_more=len(rows) > page_size)


class SqlImageDestination:
    """Single-row writer for the destination image table"""

    def __init__(self, engine: Engine):
        self.engine = engine

    def insert(self, record: Image) -> None:
        with Session(self.engine, expire_on_commit=False) as session:
            try:
                session.add(record)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                raise InsertError(
                    f"database cannot store the image: {_describe(e)}"
                ) from e
