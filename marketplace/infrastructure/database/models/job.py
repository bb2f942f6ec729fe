"""
Job SQLAlchemy model.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from marketplace.domain.value_objects.approval_status import ApprovalStatus

from .base import BaseModel


class JobModel(BaseModel):
    """Job database model."""

    __tablename__ = "jobs"
    __table_args__ = (CheckConstraint("price > 0", name="ck_jobs_price_positive"),)

    contract_id = Column(
        Uuid(as_uuid=True), ForeignKey("contracts.id"), nullable=False, index=True
    )
    # Copied from the contract at creation time
    client_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True
    )
    contractor_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True
    )

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)

    completed = Column(Boolean, nullable=False, default=False, index=True)
    approval_status = Column(
        Enum(
            ApprovalStatus,
            name="approval_status_enum",
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=False,
        default=ApprovalStatus.PENDING,
        index=True,
    )
    paid = Column(Boolean, nullable=False, default=False, index=True)
    paid_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    contract = relationship("ContractModel", back_populates="jobs")
    client = relationship("ProfileModel", foreign_keys=[client_id])
    contractor = relationship("ProfileModel", foreign_keys=[contractor_id])

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title={self.title[:50]}, paid={self.paid})>"
