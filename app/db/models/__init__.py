from app.db.models.client import Client
from app.db.models.policy import Policy
from app.db.models.claim import Claim

__all__ = ["Client", "Policy", "Claim"]
