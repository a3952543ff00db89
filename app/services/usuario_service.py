"""Users: rol_id must point at an active role."""

from app.models.usuario import Usuario
from app.services.crud_service import CrudService
from app.services.rol_service import RolService


class UsuarioService(CrudService[Usuario]):
    model = Usuario
    label = "Usuario"
    not_found_message = "Usuario no encontrado"
    deleted_message = "Usuario eliminado exitosamente"
    references = {"rol_id": RolService}
