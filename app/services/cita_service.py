"""
Test-drive appointments.
A vehicle can hold only one active appointment per (fecha_cita, hora_cita).
The check runs before insert only; updates may move an appointment onto an
occupied slot.
"""

from app.models.cita_prueba_manejo import CitaPruebaManejo
from app.services.crud_service import CrudService
from app.services.usuario_service import UsuarioService
from app.services.vehiculo_service import VehiculoService


class CitaService(CrudService[CitaPruebaManejo]):
    model = CitaPruebaManejo
    label = "Cita"
    not_found_message = "Cita no encontrada"
    deleted_message = "Cita eliminada exitosamente"
    duplicate_message = "Ya existe una cita para ese vehículo en la fecha y hora indicadas"
    references = {"usuario_id": UsuarioService, "vehiculo_id": VehiculoService}

    def find_duplicate(self, fields):
        return self.repo.find_by(
            fecha_cita=fields["fecha_cita"],
            hora_cita=fields["hora_cita"],
            vehiculo_id=fields["vehiculo_id"],
        )
