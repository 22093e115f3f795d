"""Database engines for the legacy and destination stores"""
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine
from .model import Image
from .logging import get_logger

logger = get_logger(__name__)


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a sync engine for one store

    The legacy and destination stores get separate engines; nothing
    coordinates transactions between them.
    """
    return create_engine(
        database_url,
        echo=echo,
        # Keep image bytes out of error messages
        hide_parameters=True,
        connect_args=(
            {"check_same_thread": False}
            if database_url.startswith("sqlite")
            else {}
        ),
    )


def create_destination_tables(engine: Engine) -> None:
    """Create the destination image table if it does not exist

    The legacy table belongs to the source store and is never created here.
    """
    logger.info("Creating destination tables...")
    try:
        SQLModel.metadata.create_all(engine, tables=[Image.__table__])
        logger.info("Destination tables created successfully")
    except Exception as e:
        logger.error(f"Failed to create destination tables: {e}")
        raise
