from app.db.models.client import Client as ClientModel
from app.db.models.policy import Policy as PolicyModel
from app.domain.lookup import Found, Lookup, LookupResult, Missing
from app.schemas.policy import Policy


class PolicyMapper:
    def __init__(self, find_client: Lookup[ClientModel]):
        self.find_client = find_client

    def to_domain(self, policy: Policy) -> LookupResult[PolicyModel]:
        """
        Build an unsaved policy attached to its client.

        Returns the client lookup's Missing unchanged when ``client_id`` does
        not resolve; no policy is built in that case.
        """
        result = self.find_client(policy.client_id)
        if isinstance(result, Missing):
            return result

        return Found(
            PolicyModel(
                policy_number=policy.policy_number,
                type=policy.type,
                coverage_amount=policy.coverage_amount,
                premium=policy.premium,
                start_date=policy.start_date,
                end_date=policy.end_date,
                client=result.value,
            )
        )

    def to_transfer(self, policy: PolicyModel) -> Policy:
        return Policy(
            id=policy.id,
            policy_number=policy.policy_number,
            type=policy.type,
            coverage_amount=policy.coverage_amount,
            premium=policy.premium,
            start_date=policy.start_date,
            end_date=policy.end_date,
            client_id=policy.client.id,
        )

    def apply(self, policy: PolicyModel, data: Policy) -> PolicyModel:
        """Copy the scalar fields of ``data`` onto an existing policy. The client is kept."""
        policy.policy_number = data.policy_number
        policy.type = data.type
        policy.coverage_amount = data.coverage_amount
        policy.premium = data.premium
        policy.start_date = data.start_date
        policy.end_date = data.end_date
        return policy
