"""
Contract SQLAlchemy model.
"""

from sqlalchemy import Column, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from marketplace.domain.value_objects.contract_status import ContractStatus

from .base import BaseModel


class ContractModel(BaseModel):
    """Contract database model."""

    __tablename__ = "contracts"

    client_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True
    )
    contractor_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True
    )
    status = Column(
        Enum(
            ContractStatus,
            name="contract_status_enum",
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=False,
        default=ContractStatus.NEW,
        index=True,
    )

    # Relationships
    client = relationship(
        "ProfileModel", foreign_keys=[client_id], back_populates="client_contracts"
    )
    contractor = relationship(
        "ProfileModel",
        foreign_keys=[contractor_id],
        back_populates="contractor_contracts",
    )
    jobs = relationship(
        "JobModel",
        back_populates="contract",
        cascade="all, delete-orphan",
        order_by="JobModel.created_at",
    )

    def __repr__(self) -> str:
        return f"<Contract(id={self.id}, status={self.status})>"
