"""Vehicles: usuario_id must point at an active user."""

from app.models.vehiculo import Vehiculo
from app.services.crud_service import CrudService
from app.services.usuario_service import UsuarioService


class VehiculoService(CrudService[Vehiculo]):
    model = Vehiculo
    label = "Vehiculo"
    not_found_message = "Vehículo no encontrado"
    deleted_message = "Vehículo eliminado exitosamente"
    references = {"usuario_id": UsuarioService}
