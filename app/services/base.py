import logging
from typing import Generic, Protocol, TypeVar

from sqlalchemy.exc import IntegrityError

from app.domain.lookup import LookupResult, Missing, unwrap
from app.errors import NotFoundError
from app.repositories.base import Repository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
SchemaT = TypeVar("SchemaT")


class RecordMapper(Protocol[ModelT, SchemaT]):
    """Translation contract the services rely on; see app/mappers."""

    def to_domain(self, data: SchemaT) -> LookupResult[ModelT]: ...

    def to_transfer(self, record: ModelT) -> SchemaT: ...

    def apply(self, record: ModelT, data: SchemaT) -> ModelT: ...


class RecordService(Generic[ModelT, SchemaT]):
    """
    Lifecycle operations for one record type.

    The repository and mapper are supplied by the caller; the service keeps no
    state of its own between calls.
    """

    def __init__(
        self,
        repository: Repository[ModelT],
        mapper: RecordMapper[ModelT, SchemaT],
    ):
        self.repository = repository
        self.mapper = mapper

    @property
    def entity(self) -> str:
        return self.repository.entity

    def list_all(self) -> list[SchemaT]:
        """Return every stored record in store order. An empty store yields []."""
        return [self.mapper.to_transfer(record) for record in self.repository.find_all()]

    def get_by_id(self, record_id: int) -> SchemaT:
        """
        Raises:
            NotFoundError: If no record has this id
        """
        return self.mapper.to_transfer(self._get_existing(record_id))

    def create(self, data: SchemaT) -> SchemaT:
        """
        Persist a new record and return it with its assigned id.

        Any id carried by ``data`` is ignored.

        Raises:
            NotFoundError: If the referenced parent record doesn't exist
        """
        result = self.mapper.to_domain(data)
        if isinstance(result, Missing):
            logger.info(
                "Rejected new %s: %s %s not found", self.entity, result.entity, result.identifier
            )
        record = unwrap(result)
        try:
            record = self.repository.save(record)
        except IntegrityError as exc:
            # The parent can vanish between the lookup and the insert
            parent = self._find_parent(data)
            if isinstance(parent, Missing):
                logger.info(
                    "Rejected new %s: %s %s deleted before save",
                    self.entity,
                    parent.entity,
                    parent.identifier,
                )
                raise parent.error() from exc
            raise
        logger.info("Created %s %s", self.entity, record.id)
        return self.mapper.to_transfer(record)

    def update(self, record_id: int, data: SchemaT) -> SchemaT:
        """
        Replace the editable fields of an existing record.

        Neither the id nor the parent reference is changed.

        Raises:
            NotFoundError: If no record has this id
            DomainValidationError: If ``data`` points at a different parent
        """
        record = self._get_existing(record_id)
        self._check_parent(record, data)
        record = self.repository.save(self.mapper.apply(record, data))
        logger.info("Updated %s %s", self.entity, record_id)
        return self.mapper.to_transfer(record)

    def delete(self, record_id: int) -> None:
        """
        Delete a record and, through the repository, everything that depends on it.

        Raises:
            NotFoundError: If no record has this id
        """
        record = self._get_existing(record_id)
        self.repository.delete(record)
        logger.info("Deleted %s %s", self.entity, record_id)

    def _get_existing(self, record_id: int) -> ModelT:
        record = self.repository.find_by_id(record_id)
        if record is None:
            logger.debug("%s %s not found", self.entity, record_id)
            raise NotFoundError(self.entity, record_id)
        return record

    def _find_parent(self, data: SchemaT) -> LookupResult | None:
        """Re-resolve the parent named by ``data``. Record types without a parent return None."""
        return None

    def _check_parent(self, record: ModelT, data: SchemaT) -> None:
        """Hook for record types that belong to a parent. Clients have none."""
        pass
