class AuthError(Exception):
    """Base class for failures raised by the credential store and auth flows."""


class NotFoundError(AuthError):
    """Username, account id or session token is absent (or did not verify)."""


class ConflictError(AuthError):
    """An account with the same username already exists."""


class StorageError(AuthError):
    """Pool checkout, connection or query failure."""


class DeserializationError(AuthError):
    """A session cookie could not be decoded or its signature is invalid."""
