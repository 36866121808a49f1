from pathlib import Path

from sqlalchemy.engine import make_url

from raugupatis import models  # noqa: F401
from raugupatis.core.config import settings
from raugupatis.core.database import Base, build_engine, build_session_factory
from raugupatis.repositories.sqlalchemy_store import SqlAlchemyFermentationStore


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_store(database_url: str | None = None) -> SqlAlchemyFermentationStore:
    url = database_url or settings.database_url
    _ensure_sqlite_directory(url)

    engine = build_engine(url, echo=settings.sql_echo)
    if settings.auto_create_tables:
        Base.metadata.create_all(bind=engine)

    return SqlAlchemyFermentationStore(build_session_factory(engine))
