from typing import Optional


class FriendshipError(Exception):
    """Base class for errors raised by the friendship services."""
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FriendshipError):
    status_code = 422

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConflictError(FriendshipError):
    status_code = 409


class NotFoundError(FriendshipError):
    status_code = 404


class NotAuthorizedError(FriendshipError):
    status_code = 403


class InvalidTransitionError(FriendshipError):
    status_code = 409


class StorageError(FriendshipError):
    """Persistence failure. The underlying database error is kept as __cause__."""
    status_code = 500
