"""Roles: names must be unique among active roles (checked before insert)."""

from app.models.rol import Rol
from app.services.crud_service import CrudService


class RolService(CrudService[Rol]):
    model = Rol
    label = "Rol"
    not_found_message = "Rol no encontrado"
    deleted_message = "Rol eliminado exitosamente"
    duplicate_message = "El rol ya existe"

    def find_duplicate(self, fields):
        return self.repo.find_by(nombre_rol=fields["nombre_rol"])
