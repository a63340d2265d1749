from app.db.models.claim import Claim as ClaimModel
from app.repositories.base import Repository


class ClaimRepository(Repository[ClaimModel]):
    model = ClaimModel
    entity = "Claim"
