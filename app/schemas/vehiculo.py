from pydantic import AliasChoices, BaseModel, Field
from datetime import datetime
from typing import Optional
from app.schemas.fields import MAX_INT

# JSON uses "año"; the Python attribute is anio
YEAR_ALIASES = AliasChoices("año", "anio")


class VehiculoCreate(BaseModel):
    marca: str = Field(..., min_length=1)
    modelo: str = Field(..., min_length=1)
    precio: int = Field(..., ge=0, le=MAX_INT)
    anio: str = Field(..., min_length=1, validation_alias=YEAR_ALIASES)
    kilometraje: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    tipo_combustible: str = Field(..., min_length=1)
    descripcion: str = Field(..., min_length=1)
    estado: str = Field(..., min_length=1)
    usuario_id: int = Field(..., gt=0, le=MAX_INT)


class VehiculoUpdate(BaseModel):
    marca: Optional[str] = Field(None, min_length=1)
    modelo: Optional[str] = Field(None, min_length=1)
    precio: Optional[int] = Field(None, ge=0, le=MAX_INT)
    anio: Optional[str] = Field(None, min_length=1, validation_alias=YEAR_ALIASES)
    kilometraje: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = Field(None, min_length=1)
    tipo_combustible: Optional[str] = Field(None, min_length=1)
    descripcion: Optional[str] = Field(None, min_length=1)
    estado: Optional[str] = Field(None, min_length=1)
    usuario_id: Optional[int] = Field(None, gt=0, le=MAX_INT)


class VehiculoOut(BaseModel):
    vehiculo_id: int
    marca: str
    modelo: str
    precio: int
    anio: str = Field(serialization_alias="año")
    kilometraje: str
    color: str
    tipo_combustible: str
    descripcion: str
    estado: str      # free text, e.g. disponible | reservado | vendido
    usuario_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
