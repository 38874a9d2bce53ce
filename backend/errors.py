"""Exceptions raised by the storage layer and the API boundary."""

from typing import Dict, Optional


class StorageError(Exception):
    """Base class for persistence failures"""


class RemoteServerError(StorageError):
    """The remote content server answered with an error or could not be reached"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SettingsConflictError(RemoteServerError):
    """A settings document changed between download and conditional upload"""


class NotFoundError(Exception):
    """Requested entity does not exist"""


class ValidationError(Exception):
    """Payload rejected at the API boundary"""
    def __init__(self, errors: Dict[str, str]):
        super().__init__('Invalid payload: ' + ', '.join(
            f'{field}: {message}' for field, message in sorted(errors.items())
        ))
        self.errors = errors
