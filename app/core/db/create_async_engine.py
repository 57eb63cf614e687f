# Third-party imports
from sqlalchemy.ext.asyncio import create_async_engine

# Local application imports
from app.core.db.sqlite_engine import enable_sqlite_foreign_keys, is_sqlite_url
from app.settings import settings

DATABASE_URL = settings.SQLALCHEMY_ASYNC_DATABASE_URI

# Asynchronous Engine
async_engine = create_async_engine(
    DATABASE_URL,
    echo=settings.SQL_ECHO,
    future=True,
)

if is_sqlite_url(DATABASE_URL):
    enable_sqlite_foreign_keys(async_engine)
