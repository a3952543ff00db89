"""
Shared columns for every dealership table.

TimestampMixin stamps created_at / updated_at on insert and update.
SoftDeleteMixin adds deleted_at; a row with deleted_at set is treated as
removed by the repositories, and __soft_cascade__ names the relationships
whose active rows are soft-deleted along with it.
"""

from datetime import datetime
from sqlalchemy import Column, DateTime


def utcnow():
    return datetime.utcnow()


class TimestampMixin:
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class SoftDeleteMixin:
    deleted_at = Column(DateTime, nullable=True, index=True)

    __soft_cascade__ = ()
