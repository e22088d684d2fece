import os
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from database.models import Base

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///career_compass.db")


def create_db_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine; SQLite connections are shared across FastAPI's worker threads."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, echo=echo, **kwargs)


engine = create_db_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = None) -> None:
    """Create tables that do not exist yet."""
    Base.metadata.create_all(bind or engine)
