# db.py
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()

def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True, "pool_recycle": 3600}

    # FastAPI runs sync handlers in a thread pool
    options = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # one shared connection, otherwise every session sees an empty database
        options["poolclass"] = StaticPool
    return options

class Database:
    """Engine and session factory for one quizhost process.

    Built explicitly at start-up (see ``main.create_app``) and disposed at
    shutdown; nothing here is created at import time.
    """

    def __init__(self, url: str):
        self.url = url
        self.engine = create_engine(url, **_engine_options(url))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        # models must be imported so their tables are registered on Base
        from quizhost import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def get_session(self):
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1

    def dispose(self) -> None:
        self.engine.dispose()
