"""SQLAlchemy engine, session factory and the per-request session dependency."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from roster_api.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # Requests are served from a threadpool; one connection may cross threads.
    connect_args = {"check_same_thread": False}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a database session and close it once the request is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
