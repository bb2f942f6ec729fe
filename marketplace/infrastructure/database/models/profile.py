"""
Profile SQLAlchemy model.
"""

from sqlalchemy import CheckConstraint, Column, Enum, Numeric, String
from sqlalchemy.orm import relationship

from marketplace.domain.value_objects.profile_type import ProfileType

from .base import BaseModel


class ProfileModel(BaseModel):
    """Profile database model."""

    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_profiles_balance_non_negative"),
    )

    type = Column(
        Enum(
            ProfileType,
            name="profile_type_enum",
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=False,
        index=True,
    )
    profession = Column(String(120), nullable=True, index=True)
    first_name = Column(String(120), nullable=False)
    last_name = Column(String(120), nullable=False)
    # Stored lower-cased; the unique index makes it case-insensitive
    email = Column(String(255), nullable=False, unique=True, index=True)
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    password_hash = Column(String(255), nullable=True)

    # Relationships
    client_contracts = relationship(
        "ContractModel",
        foreign_keys="ContractModel.client_id",
        back_populates="client",
    )
    contractor_contracts = relationship(
        "ContractModel",
        foreign_keys="ContractModel.contractor_id",
        back_populates="contractor",
    )

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, type={self.type}, email={self.email})>"
