"""
Test-drive appointments: CRUD endpoints.
POST returns 400 when the vehicle already has an appointment in the same slot.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.cita_prueba_manejo import CitaCreate, CitaUpdate, CitaOut
from app.schemas.message import MessageOut
from app.services.cita_service import CitaService
from app.services.validation import parse_id

router = APIRouter()


@router.post("/citas", response_model=CitaOut, status_code=status.HTTP_201_CREATED,
             summary="Agendar una cita de prueba de manejo")
def create_cita(body: CitaCreate, db: Session = Depends(get_db)):
    return CitaService(db).create(body.model_dump())


@router.get("/citas", response_model=list[CitaOut], summary="Obtener todas las citas")
def list_citas(db: Session = Depends(get_db)):
    return CitaService(db).list_all()


@router.get("/citas/{cita_id}", response_model=CitaOut, summary="Obtener una cita por ID")
def get_cita(cita_id: str, db: Session = Depends(get_db)):
    return CitaService(db).get(parse_id(cita_id))


@router.put("/citas/{cita_id}", response_model=CitaOut, summary="Actualizar una cita")
def update_cita(cita_id: str, body: CitaCreate, db: Session = Depends(get_db)):
    return CitaService(db).update(parse_id(cita_id), body.model_dump())


@router.patch("/citas/{cita_id}", response_model=CitaOut, summary="Actualizar parcialmente una cita")
def patch_cita(cita_id: str, body: CitaUpdate, db: Session = Depends(get_db)):
    return CitaService(db).update(parse_id(cita_id), body.model_dump(exclude_unset=True))


@router.delete("/citas/{cita_id}", response_model=MessageOut, summary="Cancelar (eliminar) una cita")
def delete_cita(cita_id: str, db: Session = Depends(get_db)):
    service = CitaService(db)
    service.delete(parse_id(cita_id))
    return {"message": service.deleted_message}
