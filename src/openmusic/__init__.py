from .exceptions import (
    OpenMusicError,
    ClientError,
    InvariantError,
    NotFoundError,
    ForbiddenError,
    PersistenceError
)

__all__ = [
    "OpenMusicError",
    "ClientError",
    "InvariantError",
    "NotFoundError",
    "ForbiddenError",
    "PersistenceError",
]
