"""Sales: CRUD endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.venta import VentaCreate, VentaUpdate, VentaOut
from app.schemas.message import MessageOut
from app.services.venta_service import VentaService
from app.services.validation import parse_id

router = APIRouter()


@router.post("/ventas", response_model=VentaOut, status_code=status.HTTP_201_CREATED,
             summary="Registrar una venta")
def create_venta(body: VentaCreate, db: Session = Depends(get_db)):
    return VentaService(db).create(body.model_dump())


@router.get("/ventas", response_model=list[VentaOut], summary="Obtener todas las ventas")
def list_ventas(db: Session = Depends(get_db)):
    return VentaService(db).list_all()


@router.get("/ventas/{venta_id}", response_model=VentaOut, summary="Obtener una venta por ID")
def get_venta(venta_id: str, db: Session = Depends(get_db)):
    return VentaService(db).get(parse_id(venta_id))


@router.put("/ventas/{venta_id}", response_model=VentaOut, summary="Actualizar una venta")
def update_venta(venta_id: str, body: VentaCreate, db: Session = Depends(get_db)):
    return VentaService(db).update(parse_id(venta_id), body.model_dump())


@router.patch("/ventas/{venta_id}", response_model=VentaOut, summary="Actualizar parcialmente una venta")
def patch_venta(venta_id: str, body: VentaUpdate, db: Session = Depends(get_db)):
    return VentaService(db).update(parse_id(venta_id), body.model_dump(exclude_unset=True))


@router.delete("/ventas/{venta_id}", response_model=MessageOut, summary="Eliminar una venta")
def delete_venta(venta_id: str, db: Session = Depends(get_db)):
    service = VentaService(db)
    service.delete(parse_id(venta_id))
    return {"message": service.deleted_message}
