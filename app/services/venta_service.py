"""Sales: buyer and vehicle must both be active."""

from app.models.venta import Venta
from app.services.crud_service import CrudService
from app.services.usuario_service import UsuarioService
from app.services.vehiculo_service import VehiculoService


class VentaService(CrudService[Venta]):
    model = Venta
    label = "Venta"
    not_found_message = "Venta no encontrada"
    deleted_message = "Venta eliminada exitosamente"
    references = {"usuario_id": UsuarioService, "vehiculo_id": VehiculoService}
