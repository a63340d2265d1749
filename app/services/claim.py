import logging

from app.db.models.claim import Claim as ClaimModel
from app.domain.lookup import LookupResult
from app.errors import DomainValidationError
from app.mappers.claim import ClaimMapper
from app.repositories.claim import ClaimRepository
from app.schemas.claim import Claim
from app.services.base import RecordService

logger = logging.getLogger(__name__)


class ClaimService(RecordService[ClaimModel, Claim]):
    def __init__(self, repository: ClaimRepository, mapper: ClaimMapper):
        super().__init__(repository, mapper)

    def _find_parent(self, data: Claim) -> LookupResult:
        return self.mapper.find_policy(data.policy_id)

    def _check_parent(self, claim: ClaimModel, data: Claim) -> None:
        """A claim stays filed against the policy it was created for."""
        if data.policy_id != claim.policy_id:
            logger.warning(
                "Rejected moving claim %s from policy %s to policy %s",
                claim.id,
                claim.policy_id,
                data.policy_id,
            )
            raise DomainValidationError(
                f"Claim {claim.id} belongs to policy {claim.policy_id}; "
                "moving a claim to another policy is not supported"
            )
