from collections.abc import Callable, Generator
from datetime import datetime

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from raugupatis import models  # noqa: F401
from raugupatis.core.database import Base, build_engine, build_session_factory
from raugupatis.models.profile import FermentationProfile
from raugupatis.models.user import User
from raugupatis.repositories.sqlalchemy_store import SqlAlchemyFermentationStore
from raugupatis.schemas.batch import BatchCreate


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return build_session_factory(engine)


@pytest.fixture
def store(session_factory: sessionmaker) -> SqlAlchemyFermentationStore:
    return SqlAlchemyFermentationStore(session_factory)


@pytest.fixture
def owners(session_factory: sessionmaker) -> dict[str, int]:
    with session_factory.begin() as db:
        alice = User(email="alice@example.com")
        bob = User(email="bob@example.com", preferred_temp_unit="celsius")
        db.add_all([alice, bob])
        db.flush()
        return {"alice": alice.id, "bob": bob.id}


@pytest.fixture
def profiles(session_factory: sessionmaker) -> dict[str, int]:
    with session_factory.begin() as db:
        rows = [
            FermentationProfile(name="Pickles", type="vegetable", min_days=3, max_days=7, temp_min=65.0, temp_max=75.0),
            FermentationProfile(name="Kombucha", type="beverage", min_days=7, max_days=14, temp_min=68.0, temp_max=78.0),
            FermentationProfile(
                name="Retired Brine",
                type="vegetable",
                min_days=2,
                max_days=4,
                temp_min=60.0,
                temp_max=70.0,
                is_active=False,
            ),
        ]
        db.add_all(rows)
        db.flush()
        return {row.name: row.id for row in rows}


@pytest.fixture
def batch_request() -> Callable[..., BatchCreate]:
    def _build(profile_id: int, name: str = "Garlic Dills", **overrides: object) -> BatchCreate:
        payload: dict[str, object] = {
            "profile_id": profile_id,
            "name": name,
            "start_date": datetime(2026, 3, 1, 9, 0),
        }
        payload.update(overrides)
        return BatchCreate(**payload)

    return _build
