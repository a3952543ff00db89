"""
Vehicles table: dealership inventory.
Each vehicle is registered by a user; sales and test-drive appointments
reference it. estado is free text (no enforced transitions).
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.mixins import TimestampMixin, SoftDeleteMixin


class Vehiculo(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "vehiculos"
    __soft_cascade__ = ("ventas", "citas")

    vehiculo_id = Column(Integer, primary_key=True, autoincrement=True)
    marca = Column(String(100), nullable=False)
    modelo = Column(String(100), nullable=False)
    precio = Column(Integer, nullable=False)
    anio = Column("año", String(10), nullable=False)
    kilometraje = Column(String(50), nullable=False)
    color = Column(String(50), nullable=False)
    tipo_combustible = Column(String(50), nullable=False)
    descripcion = Column(String(255), nullable=False)
    estado = Column(String(50), nullable=False)
    usuario_id = Column(
        Integer,
        ForeignKey("usuarios.usuario_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    usuario = relationship("Usuario", back_populates="vehiculos")
    ventas = relationship("Venta", back_populates="vehiculo")
    citas = relationship("CitaPruebaManejo", back_populates="vehiculo")

    def __repr__(self):
        return f"<Vehiculo {self.vehiculo_id} {self.marca} {self.modelo} estado={self.estado}>"
