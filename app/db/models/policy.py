from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


class Policy(Base):
    __tablename__ = "policies"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(
        Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    policy_number = Column(String(20), nullable=False)
    type = Column(String, nullable=False)
    coverage_amount = Column(Numeric(12, 2), nullable=False)
    premium = Column(Numeric(12, 2), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="policies")
    claims = relationship("Claim", back_populates="policy", order_by="Claim.id")
