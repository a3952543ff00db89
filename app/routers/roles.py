"""Roles: CRUD endpoints. POST rejects a nombre_rol already in use."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.rol import RolCreate, RolUpdate, RolOut
from app.schemas.message import MessageOut
from app.services.rol_service import RolService
from app.services.validation import parse_id

router = APIRouter()


@router.post("/roles", response_model=RolOut, status_code=status.HTTP_201_CREATED,
             summary="Crear un nuevo rol")
def create_rol(body: RolCreate, db: Session = Depends(get_db)):
    return RolService(db).create(body.model_dump())


@router.get("/roles", response_model=list[RolOut], summary="Obtener todos los roles")
def list_roles(db: Session = Depends(get_db)):
    return RolService(db).list_all()


@router.get("/roles/{rol_id}", response_model=RolOut, summary="Obtener un rol por ID")
def get_rol(rol_id: str, db: Session = Depends(get_db)):
    return RolService(db).get(parse_id(rol_id))


@router.put("/roles/{rol_id}", response_model=RolOut, summary="Actualizar un rol")
def update_rol(rol_id: str, body: RolCreate, db: Session = Depends(get_db)):
    return RolService(db).update(parse_id(rol_id), body.model_dump())


@router.patch("/roles/{rol_id}", response_model=RolOut, summary="Actualizar parcialmente un rol")
def patch_rol(rol_id: str, body: RolUpdate, db: Session = Depends(get_db)):
    return RolService(db).update(parse_id(rol_id), body.model_dump(exclude_unset=True))


@router.delete("/roles/{rol_id}", response_model=MessageOut, summary="Eliminar un rol")
def delete_rol(rol_id: str, db: Session = Depends(get_db)):
    """Soft-deletes the role and, in cascade, its users and everything they own."""
    service = RolService(db)
    service.delete(parse_id(rol_id))
    return {"message": service.deleted_message}
