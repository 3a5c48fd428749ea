"""SQLAlchemy declarative base and shared model utilities.

This module provides the declarative base class for all SQLAlchemy ORM models
and the mixins every TriCore table carries: audit timestamps and an
optimistic-concurrency version counter.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from sqlalchemy import BigInteger, DateTime, Numeric, String
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator, TypeEngine


SUBJECT_DIGITS = 32


def utc_now() -> datetime:
    """Generate UTC timestamp for database defaults.

    Uses a named function instead of lambda for SQLAlchemy 2.0 compatibility.
    Ensures proper INSERT-time evaluation.
    """
    return datetime.now(timezone.utc)


class SubjectType(TypeDecorator[int]):
    """Wide integer column for identity-provider subjects.

    Google subjects run to 21 decimal digits, past the BIGINT range, so the
    value is stored as NUMERIC(32, 0) and always surfaced as a Python int.
    Dialects without a native decimal (SQLite) would round the value through
    a float, so there it is stored as zero-padded text, which keeps equality
    and ordering of non-negative subjects.
    """

    impl = Numeric(precision=32, scale=0)
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.supports_native_decimal:
            return dialect.type_descriptor(Numeric(precision=32, scale=0))
        return dialect.type_descriptor(String(SUBJECT_DIGITS))

    def process_bind_param(self, value: int | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        if dialect.supports_native_decimal:
            return Decimal(int(value))
        return f"{int(value):0{SUBJECT_DIGITS}d}"

    def process_result_value(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        return int(value)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models.

    All models in the application should inherit from this base class.
    """

    type_annotation_map: dict[type, Any] = {}


class TimestampMixin:
    """Mixin providing created_at and updated_at timestamp columns.

    created_at is written once at insert; updated_at is refreshed on every
    UPDATE issued through SQLAlchemy.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=utc_now,  # Evaluated at INSERT time
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=utc_now,  # Evaluated at INSERT time
        onupdate=utc_now,  # Evaluated at UPDATE time
        nullable=False,
    )


class VersionMixin:
    """Mixin providing the optimistic-concurrency version counter.

    Rows start at version 1. Repositories bump the counter with a
    conditional UPDATE keyed on the version the caller last read.
    """

    version: Mapped[int] = mapped_column(
        BigInteger,
        insert_default=1,
        nullable=False,
    )
