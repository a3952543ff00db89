"""
Users table: dealership staff and customers.
Owns vehicles, sales and test-drive appointments.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.mixins import TimestampMixin, SoftDeleteMixin


class Usuario(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "usuarios"
    __soft_cascade__ = ("vehiculos", "ventas", "citas")

    usuario_id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
    apellido = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    contrasena = Column("contraseña", String(255), nullable=False)
    telefono = Column(String(50), nullable=False)
    rol_id = Column(
        Integer,
        ForeignKey("roles.rol_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    rol = relationship("Rol", back_populates="usuarios")
    vehiculos = relationship("Vehiculo", back_populates="usuario")
    ventas = relationship("Venta", back_populates="usuario")
    citas = relationship("CitaPruebaManejo", back_populates="usuario")

    def __repr__(self):
        return f"<Usuario {self.usuario_id} email={self.email} rol={self.rol_id}>"
