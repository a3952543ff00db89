from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from app.schemas.fields import MAX_INT


class CitaCreate(BaseModel):
    fecha_cita: datetime
    hora_cita: str = Field(..., min_length=1)   # e.g. "10:30"
    estado: str = Field(..., min_length=1)
    notas: str = Field(..., min_length=1)
    usuario_id: int = Field(..., gt=0, le=MAX_INT)
    vehiculo_id: int = Field(..., gt=0, le=MAX_INT)


class CitaUpdate(BaseModel):
    fecha_cita: Optional[datetime] = None
    hora_cita: Optional[str] = Field(None, min_length=1)
    estado: Optional[str] = Field(None, min_length=1)
    notas: Optional[str] = Field(None, min_length=1)
    usuario_id: Optional[int] = Field(None, gt=0, le=MAX_INT)
    vehiculo_id: Optional[int] = Field(None, gt=0, le=MAX_INT)


class CitaOut(BaseModel):
    cita_id: int
    fecha_cita: datetime
    hora_cita: str
    estado: str
    notas: str
    usuario_id: int
    vehiculo_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
