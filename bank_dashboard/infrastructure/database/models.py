"""SQLAlchemy ORM models read by the dashboard collaborators."""
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base

AMOUNT = Numeric(precision=28, scale=8, asdecimal=True)


def generate_uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(64), nullable=False, unique=True, index=True)
    email = Column(String(100), unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    roles = relationship("UserRole", back_populates="user", cascade="all, delete-orphan")


class UserRole(Base):
    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String(20), nullable=False, index=True)

    user = relationship("User", back_populates="roles")


class UserSession(Base):
    __tablename__ = "user_sessions"

    session_id = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    last_seen_at = Column(DateTime(timezone=True))


class LogEntry(Base):
    __tablename__ = "log_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    app = Column(String(64))
    level = Column(String(16), nullable=False, index=True)
    message = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    currency = Column(String(16), nullable=False, index=True)
    name = Column(String(64))
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class AccountState(Base):
    __tablename__ = "account_states"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    state = Column(String(16), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class AccountOperation(Base):
    __tablename__ = "account_operations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    operation_type = Column(String(16), nullable=False, default="deposit")
    amount = Column(AMOUNT, nullable=False, default=0)
    balance = Column(AMOUNT, nullable=False, default=0)
    locked_amount = Column(AMOUNT, nullable=False, default=0)
    total_locked = Column(AMOUNT, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Batch(Base):
    __tablename__ = "batches"

    id = Column(Integer, primary_key=True, autoincrement=True)
    network = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class BatchInfo(Base):
    __tablename__ = "batch_infos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    batch_id = Column(Integer, ForeignKey("batches.id"), nullable=False, index=True)
    status = Column(String(16), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Withdraw(Base):
    __tablename__ = "withdraws"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    amount = Column(AMOUNT, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class WithdrawInfo(Base):
    __tablename__ = "withdraw_infos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    withdraw_id = Column(Integer, ForeignKey("withdraws.id"), nullable=False, index=True)
    status = Column(String(16), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
