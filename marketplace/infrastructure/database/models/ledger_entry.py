"""
Ledger entry SQLAlchemy model.
"""

from sqlalchemy import CheckConstraint, Column, Enum, ForeignKey, Numeric, Uuid

from marketplace.domain.value_objects.ledger_entry_type import LedgerEntryType

from .base import BaseModel


class LedgerEntryModel(BaseModel):
    """Balance movement database model."""

    __tablename__ = "ledger_entries"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_ledger_entries_amount_positive"),
    )

    entry_type = Column(
        Enum(
            LedgerEntryType,
            name="ledger_entry_type_enum",
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=False,
    )
    amount = Column(Numeric(12, 2), nullable=False)
    debit_profile_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=True, index=True
    )
    credit_profile_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True
    )
    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<LedgerEntry(id={self.id}, type={self.entry_type}, amount={self.amount})>"
