from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class RolCreate(BaseModel):
    nombre_rol: str = Field(..., min_length=1)
    descripcion: str = Field(..., min_length=1)


class RolUpdate(BaseModel):
    nombre_rol: Optional[str] = Field(None, min_length=1)
    descripcion: Optional[str] = Field(None, min_length=1)


class RolOut(BaseModel):
    rol_id: int
    nombre_rol: str
    descripcion: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
