"""Generate database session"""

from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import get_settings
from src.db.schema import Base


def build_session_factory(
    database_url: Optional[str] = None, echo: Optional[bool] = None
) -> sessionmaker[Session]:
    """Engine + session factory for the configured database. Ensures all tables are created."""
    settings = get_settings()
    engine = create_engine(
        database_url or settings.database_url,
        echo=settings.echo_sql if echo is None else echo,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


def get_db(
    session_factory: Optional[sessionmaker[Session]] = None,
) -> Generator[Session, None, None]:
    db = (session_factory or build_session_factory())()
    try:
        yield db
    finally:
        db.close()
