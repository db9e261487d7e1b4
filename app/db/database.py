from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool
from app.config.environments import DATABASE_URL

# psycopg2 / bare postgres urls are served through asyncpg
ASYNC_DB_URL = (
    DATABASE_URL
    .replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    .replace("postgresql://", "postgresql+asyncpg://")
)

connect_args = {}
if ASYNC_DB_URL.startswith("postgresql+asyncpg"):
    # pgbouncer in transaction mode cannot keep prepared statements
    connect_args = {
        "statement_cache_size": 0,
        "prepared_statement_cache_size": 0,
    }

engine = create_async_engine(
    ASYNC_DB_URL,
    poolclass=NullPool,
    connect_args=connect_args,
)

AsyncSessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


def insert_for(db: AsyncSession, model):
    """
    Dialect specific INSERT so callers can use ON CONFLICT clauses.

    Both postgresql and sqlite expose on_conflict_do_nothing / on_conflict_do_update
    with the same signature.
    """
    if db.get_bind().dialect.name == "sqlite":
        return sqlite.insert(model)
    return postgresql.insert(model)
