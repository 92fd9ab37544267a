"""Redis document-store adapter."""

from .redis_account_store import RedisAccountStore

__all__ = ["RedisAccountStore"]
