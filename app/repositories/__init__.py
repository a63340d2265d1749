from app.repositories.claim import ClaimRepository
from app.repositories.client import ClientRepository
from app.repositories.policy import PolicyRepository

__all__ = ["ClaimRepository", "ClientRepository", "PolicyRepository"]
