"""Custom exceptions for the record stores."""


class RecordStoreError(Exception):
    """Base exception for record store errors."""


class AdministratorExistsError(RecordStoreError):
    """Administrator with given email already exists."""
