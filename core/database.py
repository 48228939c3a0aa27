import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from core.config import settings
from core.errors import ConflictError, StorageError
# Use the same Base as models to ensure one metadata registry
from models.base import Base

logger = logging.getLogger(__name__)


def create_db_engine(url: str):
    if url.startswith("sqlite"):
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection so worker threads see the tables create_all made
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                future=True
            )
        return create_engine(url, connect_args={"check_same_thread": False}, future=True)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=settings.DB_POOL_SIZE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        future=True
    )


engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False, future=True)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """Run one store operation as its own unit of work.

    Commits on success. Any failure rolls back; integrity violations surface
    as ConflictError and every other SQLAlchemy error as StorageError.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("Integrity constraint violated") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("[db] transaction failed: %s", exc.__class__.__name__)
        raise StorageError("Storage failure") from exc
    except Exception:
        db.rollback()
        raise
