from app.services.claim import ClaimService
from app.services.client import ClientService
from app.services.policy import PolicyService

__all__ = ["ClaimService", "ClientService", "PolicyService"]
