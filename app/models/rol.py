"""
Roles table. Every user belongs to exactly one role.
Deleting a role soft-deletes its users (and, through them, their vehicles,
sales and test-drive appointments).
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.mixins import TimestampMixin, SoftDeleteMixin


class Rol(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "roles"
    __soft_cascade__ = ("usuarios",)

    rol_id = Column(Integer, primary_key=True, autoincrement=True)
    nombre_rol = Column(String(100), nullable=False, index=True)
    descripcion = Column(String(255), nullable=False)

    usuarios = relationship("Usuario", back_populates="rol")

    def __repr__(self):
        return f"<Rol {self.rol_id} nombre={self.nombre_rol}>"
