# smartfin/errors.py


class SmartFinError(Exception):
    """Base class for client errors"""


class ApiError(SmartFinError):
    """A request to the SmartFin API failed.

    ``status_code`` is None when the server was never reached.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self):
        return self.message


class StorageError(SmartFinError):
    """Local storage could not be read or written"""
