"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.domain.repositories.base import BaseRepository
from app.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def list(self) -> List[ModelType]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def create(self, values: dict) -> ModelType:
        db_obj = self.model(**values)
        self.db.add(db_obj)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, values: dict) -> ModelType:
        for field, value in values.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.add(db_obj)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def update_by_id(self, id: int, values: dict) -> Optional[ModelType]:
        db_obj = self.get_by_id(id)
        if db_obj is None:
            return None
        return self.update(db_obj, values)

    def delete(self, id: int) -> Optional[ModelType]:
        obj = self.db.get(self.model, id)
        if obj:
            self.db.delete(obj)
            self._commit()
        return obj
