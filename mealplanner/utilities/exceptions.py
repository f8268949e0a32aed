"""Storage error taxonomy shared by the persistence layer and its callers."""
from typing import Any, Optional


class StorageError(Exception):
    """Base class for failures raised by the persistence layer.

    Attributes:
        message: human-readable message
        key: storage key the operation targeted, if known
        code: machine-readable error code
    """

    code = "storage_error"

    def __init__(self, message: str = "Storage operation failed", key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.key = key

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.key:
            payload["key"] = self.key
        return payload

    def __str__(self) -> str:
        return self.message


class EncodeFailure(StorageError):
    """A collection could not be serialized. Nothing was written."""

    code = "encoding_failed"


class DecodeFailure(StorageError):
    """Stored data does not match the expected shape (corrupted or wrong entity type)."""

    code = "decoding_failed"


class SaveFailure(StorageError):
    """The backend could not persist an encoded collection."""

    code = "save_failed"


class FetchFailure(StorageError):
    """The backend could not read a stored collection."""

    code = "fetch_failed"
