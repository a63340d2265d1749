import logging

from app.db.models.policy import Policy as PolicyModel
from app.domain.lookup import LookupResult
from app.errors import DomainValidationError
from app.mappers.policy import PolicyMapper
from app.repositories.policy import PolicyRepository
from app.schemas.policy import Policy
from app.services.base import RecordService

logger = logging.getLogger(__name__)


class PolicyService(RecordService[PolicyModel, Policy]):
    def __init__(self, repository: PolicyRepository, mapper: PolicyMapper):
        super().__init__(repository, mapper)

    def _find_parent(self, data: Policy) -> LookupResult:
        return self.mapper.find_client(data.client_id)

    def _check_parent(self, policy: PolicyModel, data: Policy) -> None:
        """A policy stays with the client it was created for."""
        if data.client_id != policy.client_id:
            logger.warning(
                "Rejected moving policy %s from client %s to client %s",
                policy.id,
                policy.client_id,
                data.client_id,
            )
            raise DomainValidationError(
                f"Policy {policy.id} belongs to client {policy.client_id}; "
                "moving a policy to another client is not supported"
            )
