from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from shortener_client.config import settings


Base = declarative_base()


def make_engine(database_url: str) -> Engine:
    """Create an engine; SQLite needs same-thread checks disabled for FastAPI"""
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args)


engine = make_engine(settings.database_url)
