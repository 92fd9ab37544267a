"""Relational account store adapter."""

from .sql_account_store import SqlAccountStore, build_engine

__all__ = ["SqlAccountStore", "build_engine"]
