from evento_api.models.category import Category
from evento_api.models.deportefavorito import Deportefavorito
from evento_api.models.evento import Evento
from evento_api.models.user import User

__all__ = ["Category", "Deportefavorito", "Evento", "User"]
