"""Sales table: one row per vehicle sale to a user."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.mixins import TimestampMixin, SoftDeleteMixin


class Venta(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "ventas"

    venta_id = Column(Integer, primary_key=True, autoincrement=True)
    fecha = Column(DateTime, nullable=False)
    precio_final = Column(Integer, nullable=False)
    usuario_id = Column(
        Integer,
        ForeignKey("usuarios.usuario_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    vehiculo_id = Column(
        Integer,
        ForeignKey("vehiculos.vehiculo_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    estado_venta = Column(String(50), nullable=False)

    usuario = relationship("Usuario", back_populates="ventas")
    vehiculo = relationship("Vehiculo", back_populates="ventas")

    def __repr__(self):
        return f"<Venta {self.venta_id} vehiculo={self.vehiculo_id} estado={self.estado_venta}>"
