"""Translation between transfer schemas and ORM domain records.

Mappers never write. Mappers for child records resolve their parent through
an injected lookup and hand back the lookup result instead of raising.
"""

from app.mappers.claim import ClaimMapper
from app.mappers.client import ClientMapper
from app.mappers.policy import PolicyMapper

__all__ = ["ClaimMapper", "ClientMapper", "PolicyMapper"]
