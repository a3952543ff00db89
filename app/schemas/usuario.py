from pydantic import AliasChoices, BaseModel, Field
from datetime import datetime
from typing import Optional
from app.schemas.fields import MAX_INT

# contraseña is write-only: accepted here, never part of UsuarioOut
PASSWORD_ALIASES = AliasChoices("contraseña", "contrasena")


class UsuarioCreate(BaseModel):
    nombre: str = Field(..., min_length=1)
    apellido: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    contrasena: str = Field(..., min_length=1, validation_alias=PASSWORD_ALIASES)
    telefono: str = Field(..., min_length=1)
    rol_id: int = Field(..., gt=0, le=MAX_INT)


class UsuarioUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1)
    apellido: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    contrasena: Optional[str] = Field(None, min_length=1, validation_alias=PASSWORD_ALIASES)
    telefono: Optional[str] = Field(None, min_length=1)
    rol_id: Optional[int] = Field(None, gt=0, le=MAX_INT)


class UsuarioOut(BaseModel):
    usuario_id: int
    nombre: str
    apellido: str
    email: str
    telefono: str
    rol_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
