from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship

from app.db.base import Base


class Client(Base):
    __tablename__ = "clients"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    address = Column(String, nullable=False)
    contact_information = Column(String(15), nullable=False)

    # Relationships
    policies = relationship("Policy", back_populates="client", order_by="Policy.id")
