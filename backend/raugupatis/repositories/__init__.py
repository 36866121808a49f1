from raugupatis.repositories.base import FermentationStore
from raugupatis.repositories.sqlalchemy_store import SqlAlchemyFermentationStore

__all__ = ["FermentationStore", "SqlAlchemyFermentationStore"]
