from app.db.models.client import Client as ClientModel
from app.mappers.client import ClientMapper
from app.repositories.client import ClientRepository
from app.schemas.client import Client
from app.services.base import RecordService


class ClientService(RecordService[ClientModel, Client]):
    """Client lifecycle. Deleting a client also removes its policies and their claims."""

    def __init__(self, repository: ClientRepository, mapper: ClientMapper):
        super().__init__(repository, mapper)
