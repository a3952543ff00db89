# Car dealership back office: Database Models
# Import all models here for SQLAlchemy discovery

from app.models.rol import Rol                              # noqa
from app.models.usuario import Usuario                      # noqa
from app.models.vehiculo import Vehiculo                    # noqa
from app.models.venta import Venta                          # noqa
from app.models.cita_prueba_manejo import CitaPruebaManejo  # noqa
