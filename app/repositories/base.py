from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from app.domain.lookup import Found, LookupResult, Missing

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """
    Pure data access for a single ORM model.

    Subclasses set ``model`` and ``entity`` and override ``delete`` when the
    record owns dependents.
    """

    model: type[ModelT]
    entity: str

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[ModelT]:
        """Get all records in id order."""
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_by_id(self, record_id: int) -> ModelT | None:
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def lookup(self, record_id: int) -> LookupResult[ModelT]:
        """Resolve an id to ``Found(record)`` or ``Missing(entity, id)``."""
        record = self.find_by_id(record_id)
        if record is None:
            return Missing(self.entity, record_id)
        return Found(record)

    def save(self, record: ModelT) -> ModelT:
        """Insert or update a record. The id is assigned on first save."""
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        return record

    def delete(self, record: ModelT) -> None:
        self.db.delete(record)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
