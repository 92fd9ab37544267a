"""SQLAlchemy-backed account store (SQLite, PostgreSQL, MySQL/SingleStore)."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import create_engine, text, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from profilehub.models.account import AccountRecord
from profilehub.services._shared.entities import Account, Profile
from profilehub.services._shared.errors import (
    AlreadyExistsError,
    NotFoundError,
    StorageUnavailableError,
)
from profilehub.services._shared.ports import AccountStore


def build_engine(url: str, *, echo: bool = False) -> Engine:
    """
    Create an engine usable from several threads.

    SQLite connections are opened with ``check_same_thread=False``; an
    in-memory database is pinned to a single shared connection so every
    session sees the same data.
    """
    kwargs: dict[str, Any] = {"echo": echo, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in {"sqlite://", "sqlite:///"}:
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; values were written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class SqlAccountStore(AccountStore):
    """
    Relational account store.

    Uniqueness is enforced by the ``accounts`` primary key (email): inserts are
    attempted directly and a constraint violation is reported as
    :class:`AlreadyExistsError`, so two processes racing on one email cannot
    both succeed. Each operation runs in its own short transaction.

    :param engine: SQLAlchemy engine (from Flask-SQLAlchemy or :func:`build_engine`).
    """

    backend = "sql"

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False, future=True)

    # -------------------------- schema ------------------------------

    def ensure_schema(self) -> None:
        """Create the ``accounts`` table when missing (idempotent)."""
        try:
            AccountRecord.metadata.create_all(
                self.engine, tables=[AccountRecord.__table__], checkfirst=True
            )
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(self.backend, "Schema bootstrap failed") from exc

    # --------------------------- API --------------------------------

    def find_by_email(self, email: str) -> Account | None:
        try:
            with self._sessions() as session:
                record = session.get(AccountRecord, email)
                return self._to_account(record) if record is not None else None
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(self.backend) from exc

    def create_if_absent(self, account: Account) -> None:
        try:
            with self._sessions.begin() as session:
                session.add(self._to_record(account))
        except IntegrityError as exc:
            raise AlreadyExistsError("Account") from exc
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(self.backend) from exc

    def replace_profile(self, email: str, profile: Profile, updated_at: datetime) -> None:
        stmt = (
            update(AccountRecord)
            .where(AccountRecord.email == email)
            .values(profile=profile.to_document(), updated_at=updated_at)
            .execution_options(synchronize_session=False)
        )
        try:
            with self._sessions.begin() as session:
                result = session.execute(stmt)
                if result.rowcount == 0:  # type: ignore[attr-defined]
                    raise NotFoundError("Account", email)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(self.backend) from exc

    def ping(self) -> None:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(self.backend) from exc

    # -------------------------- mapping -----------------------------

    @staticmethod
    def _to_record(account: Account) -> AccountRecord:
        return AccountRecord(
            email=account.email,
            id=account.id,
            full_name=account.full_name,
            headline=account.headline,
            password_hash=account.password_digest,
            profile=account.profile.to_document(),
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    @staticmethod
    def _to_account(record: AccountRecord) -> Account:
        return Account(
            id=record.id,
            email=record.email,
            full_name=record.full_name,
            headline=record.headline or "",
            password_digest=record.password_hash,
            created_at=_as_utc(record.created_at),
            updated_at=_as_utc(record.updated_at) if record.updated_at else None,
            profile=Profile.from_document(record.profile),
        )
