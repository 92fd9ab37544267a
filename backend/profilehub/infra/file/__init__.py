from .json_file_account_store import JsonFileAccountStore

__all__ = ["JsonFileAccountStore"]
