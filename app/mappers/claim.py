from app.db.models.claim import Claim as ClaimModel
from app.db.models.policy import Policy as PolicyModel
from app.domain.lookup import Found, Lookup, LookupResult, Missing
from app.schemas.claim import Claim


class ClaimMapper:
    def __init__(self, find_policy: Lookup[PolicyModel]):
        self.find_policy = find_policy

    def to_domain(self, claim: Claim) -> LookupResult[ClaimModel]:
        """Build an unsaved claim attached to its policy, or the policy lookup's Missing."""
        result = self.find_policy(claim.policy_id)
        if isinstance(result, Missing):
            return result

        return Found(
            ClaimModel(
                claim_number=claim.claim_number,
                description=claim.description,
                claim_date=claim.claim_date,
                status=claim.status,
                policy=result.value,
            )
        )

    def to_transfer(self, claim: ClaimModel) -> Claim:
        return Claim(
            id=claim.id,
            claim_number=claim.claim_number,
            description=claim.description,
            claim_date=claim.claim_date,
            status=claim.status,
            policy_id=claim.policy.id,
        )

    def apply(self, claim: ClaimModel, data: Claim) -> ClaimModel:
        claim.claim_number = data.claim_number
        claim.description = data.description
        claim.claim_date = data.claim_date
        claim.status = data.status
        return claim
