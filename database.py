import logging
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.exc import SQLAlchemyError
from config import Config

logger = logging.getLogger(__name__)

Base = declarative_base()

def init_db(database_url=None, create_tables=True):
    """Create an engine for ``database_url`` and a session factory bound to it.

    Returns ``(engine, session_factory)``; the caller owns the engine and
    should ``dispose()`` it when done.
    """
    database_url = database_url or Config.DATABASE_URL

    logger.info(f"Initializing database engine for {database_url}")
    engine = create_engine(database_url)

    if create_tables:
        # Register the tables with Base before creating them
        import models.surah  # noqa: F401
        Base.metadata.create_all(bind=engine)

    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Context manager for SQLAlchemy sessions (used by repositories and scripts)
@contextmanager
def get_db_session(session_factory):
    """Provide a transactional scope around a series of SQLAlchemy operations."""
    db = session_factory()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"SQLAlchemy Session Error: {e}")
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"General Session Error: {e}")
        raise
    finally:
        db.close()
