"""
Test-drive appointments table.
A slot is (fecha_cita, hora_cita, vehiculo_id); duplicates are rejected by
cita_service before insert, not by a storage constraint.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.mixins import TimestampMixin, SoftDeleteMixin


class CitaPruebaManejo(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "citas_prueba_manejo"

    cita_id = Column(Integer, primary_key=True, autoincrement=True)
    fecha_cita = Column(DateTime, nullable=False, index=True)
    hora_cita = Column(String(10), nullable=False)
    estado = Column(String(50), nullable=False)
    notas = Column(String(500), nullable=False)
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

    usuario = relationship("Usuario", back_populates="citas")
    vehiculo = relationship("Vehiculo", back_populates="citas")

    def __repr__(self):
        return f"<CitaPruebaManejo {self.cita_id} vehiculo={self.vehiculo_id} {self.fecha_cita} {self.hora_cita}>"
