"""SQLAlchemy 模型定义（SQLite 兼容）。
包含：users, patients, devices, payment_methods, reports

Device 与 Patient 一对一：外键只存于 devices.patient_id，
两侧均有 relationship 访问器，序列化时不回写对方。
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .extensions import db


# 辅助 mixin
class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class User(db.Model, TimestampMixin):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(nullable=False, unique=True, index=True)
    email: Mapped[Optional[str]] = mapped_column(nullable=True)

    patient = relationship("Patient", back_populates="user", uselist=False)


class Patient(db.Model, TimestampMixin):
    __tablename__ = "patients"
    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[Optional[str]] = mapped_column(nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(nullable=True)
    user_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"), nullable=True, unique=True, index=True)

    user = relationship("User", back_populates="patient")
    device = relationship("Device", back_populates="patient", uselist=False)
    reports = relationship("Report", back_populates="patient")


class Device(db.Model, TimestampMixin):
    __tablename__ = "devices"
    id: Mapped[int] = mapped_column(primary_key=True)
    product_quantity: Mapped[int] = mapped_column(nullable=False, default=0)
    patient_id: Mapped[int] = mapped_column(ForeignKey("patients.id"), nullable=False, unique=True, index=True)

    patient = relationship("Patient", back_populates="device")


class PaymentMethod(db.Model, TimestampMixin):
    __tablename__ = "payment_methods"
    id: Mapped[int] = mapped_column(primary_key=True)
    card_number: Mapped[str] = mapped_column(nullable=False)
    card_holder: Mapped[Optional[str]] = mapped_column(nullable=True)
    expiration_date: Mapped[Optional[str]] = mapped_column(nullable=True)  # MM/YY


class Report(db.Model, TimestampMixin):
    __tablename__ = "reports"
    id: Mapped[int] = mapped_column(primary_key=True)
    patient_id: Mapped[int] = mapped_column(ForeignKey("patients.id"), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(nullable=True)

    patient = relationship("Patient", back_populates="reports")
