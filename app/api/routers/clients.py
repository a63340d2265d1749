from fastapi import APIRouter, Depends, status

from app.api.deps import get_client_service
from app.schemas.client import Client
from app.services.client import ClientService

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=list[Client])
def get_all_clients(service: ClientService = Depends(get_client_service)):
    return service.list_all()


@router.get("/{client_id}", response_model=Client)
def get_client_by_id(client_id: int, service: ClientService = Depends(get_client_service)):
    return service.get_by_id(client_id)


@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
def create_new_client(
    client_data: Client,
    service: ClientService = Depends(get_client_service),
):
    """
    Create a new client. Any ``id`` in the payload is ignored.
    """
    return service.create(client_data)


@router.put("/{client_id}", response_model=Client)
def update_client_by_id(
    client_id: int,
    client_data: Client,
    service: ClientService = Depends(get_client_service),
):
    return service.update(client_id, client_data)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client_by_id(client_id: int, service: ClientService = Depends(get_client_service)):
    """
    Delete a client by ID, along with all of its policies and their claims.
    """
    service.delete(client_id)
