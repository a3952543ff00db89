"""
Generic repository providing the CRUD operations shared by every entity.

The session is passed in explicitly; repositories never commit. The calling
service decides when to commit or roll back, so a delete and its cascade
land in a single transaction.

Reads only see active rows: a row whose deleted_at is set behaves exactly
like a missing row (get_by_id / update / delete return None).
"""

from datetime import datetime
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.database import Base
from app.utils.logger import get_logger

ModelType = TypeVar("ModelType", bound=Base)

logger = get_logger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Type Parameters:
        ModelType: the SQLAlchemy model class this repository manages.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db
        self.pk = model.__mapper__.primary_key[0]

    def _active(self):
        return self.db.query(self.model).filter(self.model.deleted_at.is_(None))

    def create(self, **fields) -> ModelType:
        entity = self.model(**fields)
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        logger.debug(f"{self.model.__name__} inserted id={self.pk_value(entity)}")
        return entity

    def get_all(self) -> list[ModelType]:
        return self._active().order_by(self.pk).all()

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        return self._active().filter(self.pk == entity_id).first()

    def find_by(self, **filters: Any) -> Optional[ModelType]:
        """First active row whose columns equal all of the given values."""
        return self._active().filter_by(**filters).first()

    def update(self, entity_id: int, **fields) -> Optional[ModelType]:
        entity = self.get_by_id(entity_id)
        if entity is None:
            return None
        for key, value in fields.items():
            setattr(entity, key, value)
        self.db.flush()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> Optional[ModelType]:
        """Soft-delete a row and its active dependents. Returns the row, or None if absent."""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return None
        self._soft_delete(entity, datetime.utcnow())
        self.db.flush()
        return entity

    def _soft_delete(self, entity, when: datetime):
        entity.deleted_at = when
        for rel in entity.__soft_cascade__:
            for child in getattr(entity, rel):
                # appointments and sales hang off both a user and a vehicle
                if child.deleted_at is None:
                    logger.debug(f"Cascading delete {type(entity).__name__} → {type(child).__name__}")
                    self._soft_delete(child, when)

    def pk_value(self, entity) -> Any:
        return getattr(entity, self.pk.key)
