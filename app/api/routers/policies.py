from fastapi import APIRouter, Depends, status

from app.api.deps import get_policy_service
from app.schemas.policy import Policy
from app.services.policy import PolicyService

router = APIRouter(prefix="/policies", tags=["policies"])


@router.get("", response_model=list[Policy])
def get_all_policies(service: PolicyService = Depends(get_policy_service)):
    return service.list_all()


@router.get("/{policy_id}", response_model=Policy)
def get_policy_by_id(policy_id: int, service: PolicyService = Depends(get_policy_service)):
    return service.get_by_id(policy_id)


@router.post("", response_model=Policy, status_code=status.HTTP_201_CREATED)
def create_new_policy(
    policy_data: Policy,
    service: PolicyService = Depends(get_policy_service),
):
    """
    Create a new policy for an existing client.

    Returns 404 if ``client_id`` does not match a client.
    """
    return service.create(policy_data)


@router.put("/{policy_id}", response_model=Policy)
def update_policy_by_id(
    policy_id: int,
    policy_data: Policy,
    service: PolicyService = Depends(get_policy_service),
):
    """
    Update a policy's details. ``client_id`` must still name the owning client;
    a different client is rejected with 400.
    """
    return service.update(policy_id, policy_data)


@router.delete("/{policy_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_policy_by_id(policy_id: int, service: PolicyService = Depends(get_policy_service)):
    """
    Delete a policy by ID, along with its claims.
    """
    service.delete(policy_id)
