from fastapi import APIRouter, Depends, status

from app.api.deps import get_claim_service
from app.schemas.claim import Claim
from app.services.claim import ClaimService

router = APIRouter(prefix="/claims", tags=["claims"])


@router.get("", response_model=list[Claim])
def get_all_claims(service: ClaimService = Depends(get_claim_service)):
    return service.list_all()


@router.get("/{claim_id}", response_model=Claim)
def get_claim_by_id(claim_id: int, service: ClaimService = Depends(get_claim_service)):
    return service.get_by_id(claim_id)


@router.post("", response_model=Claim, status_code=status.HTTP_201_CREATED)
def create_new_claim(
    claim_data: Claim,
    service: ClaimService = Depends(get_claim_service),
):
    """
    File a new claim against an existing policy. Returns 404 if ``policy_id`` is unknown.
    """
    return service.create(claim_data)


@router.put("/{claim_id}", response_model=Claim)
def update_claim_by_id(
    claim_id: int,
    claim_data: Claim,
    service: ClaimService = Depends(get_claim_service),
):
    return service.update(claim_id, claim_data)


@router.delete("/{claim_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_claim_by_id(claim_id: int, service: ClaimService = Depends(get_claim_service)):
    service.delete(claim_id)
