from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import get_settings

settings = get_settings()

# Artist lookups sit on the read path, so keep the pool small and fail fast
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,  # Log SQL queries in debug mode
    pool_pre_ping=True,   # Check connection health before using
    pool_size=3,
    max_overflow=5,
    pool_timeout=5,       # Fail fast if can't get connection
    pool_recycle=300,     # Recycle connections every 5 min to avoid stale connections
    connect_args={
        "statement_cache_size": 0,           # Required for pgbouncer (Supabase)
        "prepared_statement_cache_size": 0,  # Also required for pgbouncer
        "command_timeout": 10,               # Query timeout
    },
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass
