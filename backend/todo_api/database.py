from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, DeclarativeBase

from .config import get_settings


class Base(DeclarativeBase):
    pass


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # sessions are opened and used on uvicorn's threadpool workers
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = build_engine(get_settings().database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=True)


def init_db(bind: Engine = engine) -> None:
    """Create any missing tables"""
    Base.metadata.create_all(bind=bind)


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
