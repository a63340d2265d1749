"""Domain-level rules and value types.

This package contains logic that defines *what* the business rules are,
independent from *where* they are applied (services, repositories, etc.).
"""

from app.domain.lookup import Found, Lookup, LookupResult, Missing, unwrap

__all__ = ["Found", "Lookup", "LookupResult", "Missing", "unwrap"]
