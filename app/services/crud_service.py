"""
Shared create/read/update/delete flow for every dealership entity.

A CrudService wraps a BaseRepository and adds what the routers need on top
of a single store call:
  - referenced rows (rol_id, usuario_id, vehiculo_id) must exist and be active
  - an optional duplicate check before insert (see find_duplicate)
  - commit on success, rollback on store errors
  - absence turned into NotFoundError with the entity's own message

Duplicate checks are best-effort: they read, then insert, without a lock or
unique constraint. Two identical concurrent requests can both pass.
"""

from contextlib import contextmanager
from typing import Any, Generic, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError, ValidationError, MISSING_FIELDS_MESSAGE
from app.repositories.base_repository import BaseRepository, ModelType
from app.utils.logger import get_logger

logger = get_logger(__name__)


class CrudService(Generic[ModelType]):
    model: Type[ModelType]
    label: str                    # "Rol", "Usuario", ...
    not_found_message: str        # "Rol no encontrado"
    deleted_message: str          # "Rol eliminado exitosamente"
    duplicate_message: str = "El registro ya existe"

    # foreign key column -> service class of the referenced entity
    references: dict = {}

    def __init__(self, db: Session):
        self.db = db
        self.repo = BaseRepository(self.model, db)

    # ── Hooks ────────────────────────────────────────────────────────────
    def find_duplicate(self, fields: dict) -> Optional[ModelType]:
        """Return an active row equivalent to `fields`, if this entity forbids duplicates."""
        return None

    # ── Operations ───────────────────────────────────────────────────────
    def list_all(self) -> list[ModelType]:
        return self.repo.get_all()

    def get(self, entity_id: int) -> ModelType:
        entity = self.repo.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.not_found_message)
        return entity

    def create(self, fields: dict) -> ModelType:
        self._check_references(fields)
        if self.find_duplicate(fields) is not None:
            logger.info(f"{self.label} rejected as duplicate: {self._describe(fields)}")
            raise ConflictError(self.duplicate_message)

        with self._transaction():
            entity = self.repo.create(**fields)
        logger.info(f"{self.label} created id={self.repo.pk_value(entity)}")
        return entity

    def update(self, entity_id: int, fields: dict) -> ModelType:
        self._reject_nulls(fields)
        if self.repo.get_by_id(entity_id) is None:
            raise NotFoundError(self.not_found_message)
        self._check_references(fields)

        with self._transaction():
            entity = self.repo.update(entity_id, **fields)
        if entity is None:
            raise NotFoundError(self.not_found_message)
        logger.info(f"{self.label} updated id={entity_id} fields={sorted(fields)}")
        return entity

    def delete(self, entity_id: int) -> ModelType:
        with self._transaction():
            entity = self.repo.delete(entity_id)
        if entity is None:
            raise NotFoundError(self.not_found_message)
        logger.info(f"{self.label} deleted id={entity_id}")
        return entity

    # ── Helpers ──────────────────────────────────────────────────────────
    def _check_references(self, fields: dict):
        for column, service_cls in self.references.items():
            if column not in fields:
                continue
            ref_id = fields[column]
            if service_cls(self.db).repo.get_by_id(ref_id) is None:
                logger.warning(f"{self.label} references missing {service_cls.label} {column}={ref_id}")
                raise NotFoundError(service_cls.not_found_message)

    @staticmethod
    def _reject_nulls(fields: dict):
        nulls = sorted(k for k, v in fields.items() if v is None)
        if nulls:
            raise ValidationError(MISSING_FIELDS_MESSAGE, fields=nulls)

    @staticmethod
    def _describe(fields: dict) -> dict[str, Any]:
        return {k: v for k, v in fields.items() if k != "contrasena"}

    @contextmanager
    def _transaction(self):
        """Commit on clean exit; roll back and re-raise on store errors."""
        try:
            yield self.db
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"{self.label} store error, rolling back: {e}")
            self.db.rollback()
            raise
