from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Policy(Base):
    __tablename__ = "policies"

    id = Column(Integer, primary_key=True, index=True)
    policy_number = Column(String(50), nullable=False, unique=True)
    named_insured = Column(String(255), nullable=False)
    # Always stored upper-case (ACTIVE, BOUND, ...)
    status = Column(String(50), nullable=False, index=True)
    effective_date = Column(Date, nullable=True)
    expiration_date = Column(Date, nullable=True)
    premium = Column(Numeric(12, 2), nullable=True)

    # Internal search fields; column names are the store field names
    MNPID = Column(String(100), nullable=True)
    MBU_handler = Column(String(255), nullable=True)
    producing_UW = Column(String(255), nullable=True)

    # Relationships
    lines_of_business = relationship(
        "PolicyLineOfBusiness",
        back_populates="policy",
        cascade="all, delete-orphan",
        order_by="PolicyLineOfBusiness.id",
    )

    @property
    def line_of_business(self) -> list[str]:
        return [line.name for line in self.lines_of_business]


class PolicyLineOfBusiness(Base):
    __tablename__ = "policy_lines_of_business"

    id = Column(Integer, primary_key=True, index=True)
    policy_id = Column(
        Integer, ForeignKey("policies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False, index=True)

    # Relationships
    policy = relationship("Policy", back_populates="lines_of_business")
