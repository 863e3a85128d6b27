class FileShareError(Exception):
    """Base class for errors raised by the file sharing core."""


class NotFoundError(FileShareError):
    """A path or share token does not exist."""


class ConflictError(FileShareError):
    """The username is already registered."""


class StorageError(FileShareError):
    """The user store or a directory could not be read or written."""


class AuthFailure(FileShareError):
    """Submitted credentials did not match a stored user."""
