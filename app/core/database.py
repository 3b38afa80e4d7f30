from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings


def engine_options(url: str) -> dict:
    """
    Keyword arguments for create_engine.

    SQLite uses a single-connection pool that rejects pool sizing.
    """
    options = {"pool_pre_ping": True}  # Verify connections before using them
    if not url.startswith("sqlite"):
        options["pool_size"] = 10  # Connection pool size
        options["max_overflow"] = 20  # Allow up to 20 connections beyond pool_size
    return options


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database.

    Imports the models so they register on Base.metadata, then creates any
    missing tables. Existing tables are left untouched.
    """
    from app.models import company, job, user, application  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
