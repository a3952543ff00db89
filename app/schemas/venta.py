from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from app.schemas.fields import MAX_INT


class VentaCreate(BaseModel):
    fecha: datetime
    precio_final: int = Field(..., ge=0, le=MAX_INT)
    usuario_id: int = Field(..., gt=0, le=MAX_INT)
    vehiculo_id: int = Field(..., gt=0, le=MAX_INT)
    estado_venta: str = Field(..., min_length=1)


class VentaUpdate(BaseModel):
    fecha: Optional[datetime] = None
    precio_final: Optional[int] = Field(None, ge=0, le=MAX_INT)
    usuario_id: Optional[int] = Field(None, gt=0, le=MAX_INT)
    vehiculo_id: Optional[int] = Field(None, gt=0, le=MAX_INT)
    estado_venta: Optional[str] = Field(None, min_length=1)


class VentaOut(BaseModel):
    venta_id: int
    fecha: datetime
    precio_final: int
    usuario_id: int
    vehiculo_id: int
    estado_venta: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
