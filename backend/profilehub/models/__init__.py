from profilehub.models.account import AccountRecord
from profilehub.models.base import Base, metadata

__all__ = ["AccountRecord", "Base", "metadata"]
