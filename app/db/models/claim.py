from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


class Claim(Base):
    __tablename__ = "claims"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    policy_id = Column(
        Integer, ForeignKey("policies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    claim_number = Column(String, nullable=False)
    description = Column(String, nullable=False)
    claim_date = Column(Date, nullable=False)
    status = Column(String, nullable=True)

    # Relationships
    policy = relationship("Policy", back_populates="claims")
