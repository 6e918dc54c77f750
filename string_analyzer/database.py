from contextlib import contextmanager
import threading
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()

# ------------------------------------------------------------------------------
# DATABASE URL HANDLING
# ------------------------------------------------------------------------------

# Records live only as long as the process: a private in-memory SQLite database.
DATABASE_URL = "sqlite://"


# ------------------------------------------------------------------------------
# STORE
# ------------------------------------------------------------------------------
class StringStore:
    """
    Owns the in-memory database holding analyzed strings.

    SQLite gives us a single table with a primary key on the hash, and the
    lock serializes every check-then-write sequence across request threads.
    """

    def __init__(self, url: str = DATABASE_URL):
        self.engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,  # every session shares the one in-memory connection
        )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self._lock = threading.Lock()
        self.init_db()

    def init_db(self):
        """Create the string_records table on the fresh database."""
        from string_analyzer.models import string_record  # noqa: F401  ensure models are imported
        Base.metadata.create_all(bind=self.engine)
        logger.debug("String store initialized")

    @contextmanager
    def session(self):
        """Yield a Session while holding the store lock."""
        with self._lock:
            db: Session = self.SessionLocal()
            try:
                yield db
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def dispose(self):
        self.engine.dispose()


store = StringStore()


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def get_store() -> StringStore:
    """Dependency to provide the process-wide string store."""
    return store
