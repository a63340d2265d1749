from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from app.errors import NotFoundError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """A lookup that resolved to a record."""

    value: T


@dataclass(frozen=True, slots=True)
class Missing:
    """A lookup whose identifier did not resolve.

    Carries enough to report which record type and which id were absent,
    so callers can decide where the failure surfaces.
    """

    entity: str
    identifier: int

    def error(self) -> NotFoundError:
        return NotFoundError(self.entity, self.identifier)


LookupResult = Union[Found[T], Missing]

# Read-only capability handed to mappers that need to resolve a parent record.
Lookup = Callable[[int], LookupResult[T]]


def unwrap(result: LookupResult[T]) -> T:
    """Return the resolved value, raising NotFoundError for a Missing result."""
    if isinstance(result, Missing):
        raise result.error()
    return result.value
