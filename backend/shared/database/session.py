from typing import Generator, Optional
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from backend.shared.config.settings import Settings, get_settings
from backend.shared.config.logging_config import get_logger

logger = get_logger(__name__)


class DatabaseSession:
    """Owns the engine and hands out sessions bound to it."""

    def __init__(self, settings: Optional[Settings] = None, url: Optional[str] = None):
        """
        Args:
            settings: Application settings, the cached ones when omitted
            url: Database URL to use instead of ``settings.database.url``
        """
        self.settings = settings or get_settings()
        self.url = url or self.settings.database.url
        self.engine: Engine = create_engine(
            self.url, echo=self.settings.database.echo_sql, **self._engine_options()
        )
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False
        )
        logger.info("Database engine ready", extra={"db_url": self.masked_url})

    def _engine_options(self) -> dict:
        if self.url.startswith("sqlite"):
            # Requests are served from a thread pool
            options = {"connect_args": {"check_same_thread": False}}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, otherwise each checkout sees an empty database
                options["poolclass"] = StaticPool
            return options

        pool = self.settings.database
        return {
            "pool_pre_ping": True,
            "pool_size": pool.pool_size,
            "max_overflow": pool.max_overflow,
            "pool_timeout": pool.pool_timeout,
            "pool_recycle": pool.pool_recycle,
        }

    @property
    def masked_url(self) -> str:
        return make_url(self.url).render_as_string(hide_password=True)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Transactional scope: commits when the block exits cleanly, rolls back
        and re-raises otherwise.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Rolled back database session: {str(e)}", exc_info=True)
            raise
        finally:
            session.close()

    def create_all(self) -> None:
        from backend.shared.models import Base

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema is up to date")

    def drop_all(self) -> None:
        from backend.shared.models import Base

        Base.metadata.drop_all(bind=self.engine)

    def new_session(self) -> Session:
        """An unmanaged session; the caller closes it."""
        return self.session_factory()


_db: Optional[DatabaseSession] = None


def get_db_manager() -> DatabaseSession:
    """Process-wide manager, created from settings on first use."""
    global _db
    if _db is None:
        _db = DatabaseSession()
    return _db


def set_db_manager(manager: Optional[DatabaseSession]) -> None:
    """Swap the process-wide manager, e.g. for an in-memory database in tests."""
    global _db
    _db = manager


def init_db() -> None:
    get_db_manager().create_all()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request."""
    session = get_db_manager().new_session()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Transactional session outside a request, for repositories and probes."""
    with get_db_manager().session() as session:
        yield session
