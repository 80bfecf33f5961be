"""
SQLAlchemy models for Comptoir persistence.
"""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from comptoir.domain.services.clock import utc_now


class Base(DeclarativeBase):
    """Base class for all models."""


class UserModel(Base):
    """User database model - wallet-keyed identity."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    wallet_address: Mapped[str] = mapped_column(
        String(128), unique=True, index=True, nullable=False
    )
    email: Mapped[str | None] = mapped_column(String(255))
    username: Mapped[str | None] = mapped_column(String(100))
    kyc_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending"
    )
    premium_account: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    # Relationships
    transactions: Mapped[list["TransactionModel"]] = relationship(
        "TransactionModel",
        back_populates="user",
        lazy="select",
        cascade="all, delete-orphan",
    )
    staking_positions: Mapped[list["StakingPositionModel"]] = relationship(
        "StakingPositionModel",
        back_populates="user",
        lazy="select",
        cascade="all, delete-orphan",
    )
    lending_positions: Mapped[list["LendingPositionModel"]] = relationship(
        "LendingPositionModel",
        back_populates="user",
        lazy="select",
        cascade="all, delete-orphan",
    )
    proposals: Mapped[list["ProposalModel"]] = relationship(
        "ProposalModel",
        back_populates="proposer",
        lazy="select",
    )


class TransactionModel(Base):
    """Trade log database model (append-only)."""

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), index=True, nullable=False
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    token_in: Mapped[str] = mapped_column(String(20), nullable=False)
    token_out: Mapped[str | None] = mapped_column(String(20))
    amount_in: Mapped[float] = mapped_column(Float, nullable=False)
    amount_out: Mapped[float | None] = mapped_column(Float)
    price: Mapped[float | None] = mapped_column(Float)
    fee: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    tx_hash: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, index=True
    )

    # Relationships
    user: Mapped["UserModel"] = relationship(
        "UserModel", back_populates="transactions", lazy="select"
    )


class StakingPositionModel(Base):
    """Staking position database model."""

    __tablename__ = "staking_positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), index=True, nullable=False
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    rewards: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    start_date: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active", index=True
    )

    # Relationships
    user: Mapped["UserModel"] = relationship(
        "UserModel", back_populates="staking_positions", lazy="select"
    )


class LendingPositionModel(Base):
    """Lending/borrowing position database model."""

    __tablename__ = "lending_positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), index=True, nullable=False
    )
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    token: Mapped[str] = mapped_column(String(20), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    interest_rate: Mapped[float] = mapped_column(Float, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active", index=True
    )

    # Relationships
    user: Mapped["UserModel"] = relationship(
        "UserModel", back_populates="lending_positions", lazy="select"
    )


class ProposalModel(Base):
    """Governance proposal database model."""

    __tablename__ = "proposals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    proposer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    for_votes: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    against_votes: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active", index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    # Relationships
    proposer: Mapped["UserModel"] = relationship(
        "UserModel", back_populates="proposals", lazy="select"
    )
