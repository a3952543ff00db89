"""Vehicles: dealership inventory CRUD."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.vehiculo import VehiculoCreate, VehiculoUpdate, VehiculoOut
from app.schemas.message import MessageOut
from app.services.vehiculo_service import VehiculoService
from app.services.validation import parse_id

router = APIRouter()


@router.post("/vehiculos", response_model=VehiculoOut, status_code=status.HTTP_201_CREATED,
             summary="Registrar un vehículo")
def create_vehiculo(body: VehiculoCreate, db: Session = Depends(get_db)):
    return VehiculoService(db).create(body.model_dump())


@router.get("/vehiculos", response_model=list[VehiculoOut], summary="Obtener todos los vehículos")
def list_vehiculos(db: Session = Depends(get_db)):
    return VehiculoService(db).list_all()


@router.get("/vehiculos/{vehiculo_id}", response_model=VehiculoOut, summary="Obtener un vehículo por ID")
def get_vehiculo(vehiculo_id: str, db: Session = Depends(get_db)):
    return VehiculoService(db).get(parse_id(vehiculo_id))


@router.put("/vehiculos/{vehiculo_id}", response_model=VehiculoOut, summary="Actualizar un vehículo")
def update_vehiculo(vehiculo_id: str, body: VehiculoCreate, db: Session = Depends(get_db)):
    return VehiculoService(db).update(parse_id(vehiculo_id), body.model_dump())


@router.patch("/vehiculos/{vehiculo_id}", response_model=VehiculoOut,
              summary="Actualizar parcialmente un vehículo")
def patch_vehiculo(vehiculo_id: str, body: VehiculoUpdate, db: Session = Depends(get_db)):
    """e.g. {"estado": "vendido"}"""
    return VehiculoService(db).update(parse_id(vehiculo_id), body.model_dump(exclude_unset=True))


@router.delete("/vehiculos/{vehiculo_id}", response_model=MessageOut, summary="Eliminar un vehículo")
def delete_vehiculo(vehiculo_id: str, db: Session = Depends(get_db)):
    service = VehiculoService(db)
    service.delete(parse_id(vehiculo_id))
    return {"message": service.deleted_message}
