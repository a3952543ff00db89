"""Users: CRUD endpoints. contraseña is accepted on write and never returned."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.usuario import UsuarioCreate, UsuarioUpdate, UsuarioOut
from app.schemas.message import MessageOut
from app.services.usuario_service import UsuarioService
from app.services.validation import parse_id

router = APIRouter()


@router.post("/usuarios", response_model=UsuarioOut, status_code=status.HTTP_201_CREATED,
             summary="Crear un nuevo usuario")
def create_usuario(body: UsuarioCreate, db: Session = Depends(get_db)):
    """404 if rol_id does not match an active role."""
    return UsuarioService(db).create(body.model_dump())


@router.get("/usuarios", response_model=list[UsuarioOut], summary="Obtener todos los usuarios")
def list_usuarios(db: Session = Depends(get_db)):
    return UsuarioService(db).list_all()


@router.get("/usuarios/{usuario_id}", response_model=UsuarioOut, summary="Obtener un usuario por ID")
def get_usuario(usuario_id: str, db: Session = Depends(get_db)):
    return UsuarioService(db).get(parse_id(usuario_id))


@router.put("/usuarios/{usuario_id}", response_model=UsuarioOut, summary="Actualizar un usuario")
def update_usuario(usuario_id: str, body: UsuarioCreate, db: Session = Depends(get_db)):
    return UsuarioService(db).update(parse_id(usuario_id), body.model_dump())


@router.patch("/usuarios/{usuario_id}", response_model=UsuarioOut,
              summary="Actualizar parcialmente un usuario")
def patch_usuario(usuario_id: str, body: UsuarioUpdate, db: Session = Depends(get_db)):
    return UsuarioService(db).update(parse_id(usuario_id), body.model_dump(exclude_unset=True))


@router.delete("/usuarios/{usuario_id}", response_model=MessageOut, summary="Eliminar un usuario")
def delete_usuario(usuario_id: str, db: Session = Depends(get_db)):
    """Soft-deletes the user with its vehicles, sales and appointments."""
    service = UsuarioService(db)
    service.delete(parse_id(usuario_id))
    return {"message": service.deleted_message}
