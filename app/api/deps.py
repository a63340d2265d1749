from fastapi import Depends
from sqlalchemy.orm import Session

from app.db import SessionLocal
from app.mappers import ClaimMapper, ClientMapper, PolicyMapper
from app.repositories import ClaimRepository, ClientRepository, PolicyRepository
from app.services import ClaimService, ClientService, PolicyService


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    return ClientService(ClientRepository(db), ClientMapper())


def get_policy_service(db: Session = Depends(get_db)) -> PolicyService:
    """Wire a policy service whose mapper resolves clients from the same session."""
    return PolicyService(
        PolicyRepository(db),
        PolicyMapper(find_client=ClientRepository(db).lookup),
    )


def get_claim_service(db: Session = Depends(get_db)) -> ClaimService:
    """Wire a claim service whose mapper resolves policies from the same session."""
    return ClaimService(
        ClaimRepository(db),
        ClaimMapper(find_policy=PolicyRepository(db).lookup),
    )
