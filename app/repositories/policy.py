from app.db.models.policy import Policy as PolicyModel
from app.repositories.base import Repository


class PolicyRepository(Repository[PolicyModel]):
    model = PolicyModel
    entity = "Policy"

    def delete(self, policy: PolicyModel) -> None:
        """Delete a policy together with its claims."""
        for claim in policy.claims:
            self.db.delete(claim)
        self.db.delete(policy)
        self._commit()
